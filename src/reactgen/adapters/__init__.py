"""Source extractor interfaces."""

from .base import EMPTY_EXTRACTION, ExtractionError, ExtractionResult, SourceExtractor
from .fallback import EmptyExtractor
from .lexical import (
    BraceScanResult,
    LexicalRules,
    MaskedSource,
    line_depths,
    line_offsets,
    mask_comments_and_strings,
    mask_source,
    scan_brace_balance,
)
from .registry import ExtractorRegistry
from .runtime import build_extractor_registry, extract_safely
from .ts_js import TypeScriptJsxExtractor

__all__ = [
    "BraceScanResult",
    "EMPTY_EXTRACTION",
    "EmptyExtractor",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorRegistry",
    "LexicalRules",
    "MaskedSource",
    "SourceExtractor",
    "TypeScriptJsxExtractor",
    "build_extractor_registry",
    "extract_safely",
    "line_depths",
    "line_offsets",
    "mask_comments_and_strings",
    "mask_source",
    "scan_brace_balance",
]
