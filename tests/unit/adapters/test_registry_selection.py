from __future__ import annotations

from dataclasses import dataclass

import pytest

from reactgen.adapters import (
    EmptyExtractor,
    ExtractionResult,
    ExtractorRegistry,
    build_extractor_registry,
)


@dataclass(slots=True)
class PrefixExtractor:
    name: str
    prefix: str

    def supports_path(self, path: str) -> bool:
        return path.startswith(self.prefix)

    def extract(self, content: str, path: str) -> ExtractionResult:
        _ = content
        return ExtractionResult(exports=(path,))


def test_registry_selects_first_matching_extractor_in_registration_order() -> None:
    registry = ExtractorRegistry()
    registry.register(PrefixExtractor(name="first-src", prefix="src/"))
    registry.register(PrefixExtractor(name="second-src", prefix="src/"))
    registry.register(EmptyExtractor(), fallback=True)

    selected = registry.select("src/main.tsx")

    assert selected.name == "first-src"
    assert registry.names() == ("first-src", "second-src", "empty")


def test_registry_uses_fallback_for_unsupported_path() -> None:
    registry = build_extractor_registry()

    assert registry.select("src/theme.css").name == "empty"
    assert registry.select("src/App.tsx").name == "ts_jsx_lexical"


def test_registry_without_fallback_raises_lookup_error() -> None:
    registry = ExtractorRegistry()

    with pytest.raises(LookupError, match="No extractor"):
        registry.select("src/App.tsx")
