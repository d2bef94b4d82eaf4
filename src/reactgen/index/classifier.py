"""File classification on top of the extraction boundary."""

from __future__ import annotations

from reactgen.adapters import ExtractorRegistry, extract_safely
from reactgen.index.models import (
    CATEGORY_COMPONENT,
    CATEGORY_TEST,
    CATEGORY_UTILITY,
    FileRecord,
    ScannedFile,
    file_name,
)

_TEST_MARKERS = (".test.", ".spec.")


def is_test_file(relative_path: str) -> bool:
    """Return True when the filename carries a .test. or .spec. segment."""
    name = file_name(relative_path)
    return any(marker in name for marker in _TEST_MARKERS)


def classify_category(relative_path: str, exports: tuple[str, ...]) -> str:
    """Apply the test > component > utility category rule."""
    if is_test_file(relative_path):
        return CATEGORY_TEST
    if exports:
        return CATEGORY_COMPONENT
    return CATEGORY_UTILITY


def classify_file(scanned: ScannedFile, registry: ExtractorRegistry) -> FileRecord:
    """Extract exports/imports for one scanned file and build its record."""
    extraction = extract_safely(registry, scanned.content, scanned.relative_path)
    return FileRecord(
        relative_path=scanned.relative_path,
        absolute_path=str(scanned.absolute_path),
        line_count=scanned.line_count,
        category=classify_category(scanned.relative_path, extraction.exports),
        exports=extraction.exports,
        imports=extraction.imports,
    )
