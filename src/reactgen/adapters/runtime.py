"""Runtime extractor registry construction and the never-failing extraction boundary."""

from __future__ import annotations

import logging

from reactgen.adapters.base import EMPTY_EXTRACTION, ExtractionResult
from reactgen.adapters.fallback import EmptyExtractor
from reactgen.adapters.registry import ExtractorRegistry
from reactgen.adapters.ts_js import TypeScriptJsxExtractor

logger = logging.getLogger(__name__)


def build_extractor_registry() -> ExtractorRegistry:
    """Build the default extractor registry."""
    registry = ExtractorRegistry()
    registry.register(TypeScriptJsxExtractor())
    registry.register(EmptyExtractor(), fallback=True)
    return registry


def extract_safely(registry: ExtractorRegistry, content: str, path: str) -> ExtractionResult:
    """Run the selected extractor; any failure degrades to an empty result for this file."""
    try:
        extractor = registry.select(path)
        return extractor.extract(content, path)
    except Exception as error:
        logger.warning("Failed to parse %s: %s", path, error)
        return EMPTY_EXTRACTION
