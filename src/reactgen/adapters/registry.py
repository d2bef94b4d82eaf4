"""Extractor registry with deterministic selection behavior."""

from __future__ import annotations

from dataclasses import dataclass, field

from reactgen.adapters.base import SourceExtractor


@dataclass(slots=True)
class ExtractorRegistry:
    """Ordered extractor registry with explicit fallback extractor."""

    _extractors: list[SourceExtractor] = field(default_factory=list)
    _fallback: SourceExtractor | None = None

    def register(self, extractor: SourceExtractor, *, fallback: bool = False) -> None:
        """Register an extractor in deterministic insertion order."""
        if fallback:
            self._fallback = extractor
            return
        self._extractors.append(extractor)

    def select(self, path: str) -> SourceExtractor:
        """Select the first extractor that supports the path, else fallback."""
        for extractor in self._extractors:
            if extractor.supports_path(path):
                return extractor
        if self._fallback is not None:
            return self._fallback
        raise LookupError(f"No extractor supports path: {path}")

    def names(self) -> tuple[str, ...]:
        """Return registered extractor names in deterministic order."""
        ordered = [extractor.name for extractor in self._extractors]
        if self._fallback is not None:
            ordered.append(self._fallback.name)
        return tuple(ordered)
