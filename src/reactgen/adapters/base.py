"""Core extractor protocol and data types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Exported identifiers and imported module specifiers of one file."""

    exports: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()


EMPTY_EXTRACTION = ExtractionResult()


class ExtractionError(ValueError):
    """Raised by an extractor when source text cannot be parsed."""


class SourceExtractor(Protocol):
    """Protocol implemented by source extractors."""

    name: str

    def supports_path(self, path: str) -> bool:
        """Return True when extractor supports a file path."""

    def extract(self, content: str, path: str) -> ExtractionResult:
        """Return exports and imports in source order."""
