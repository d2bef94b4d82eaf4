"""Fallback extractor for files no other extractor supports."""

from __future__ import annotations

from reactgen.adapters.base import EMPTY_EXTRACTION, ExtractionResult


class EmptyExtractor:
    """Default extractor that reports no exports and no imports."""

    name = "empty"

    def supports_path(self, path: str) -> bool:
        """Fallback supports any path."""
        _ = path
        return True

    def extract(self, content: str, path: str) -> ExtractionResult:
        """Fallback returns an empty extraction."""
        _ = content
        _ = path
        return EMPTY_EXTRACTION
