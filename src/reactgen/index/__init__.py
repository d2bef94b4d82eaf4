"""Component index package."""

from .builder import INDEX_FORMAT_VERSION, IndexBuildError, build_index, build_project_index
from .classifier import classify_category, classify_file, is_test_file
from .document import (
    IndexDocumentError,
    IndexSchemaUnsupportedError,
    index_from_document,
    index_to_document,
)
from .manager import PROJECT_MAP_FILENAME, IndexManager, IndexStatus, RefreshResult
from .models import (
    CATEGORY_COMPONENT,
    CATEGORY_TEST,
    CATEGORY_UTILITY,
    DirectoryEntry,
    DirectoryNode,
    FileEntry,
    FileRecord,
    Index,
    ScanCandidate,
    ScannedFile,
    file_name,
    strip_extension,
    stripped_file_name,
)
from .scanner import ScanIOError, discover_component_files, scan_project

__all__ = [
    "CATEGORY_COMPONENT",
    "CATEGORY_TEST",
    "CATEGORY_UTILITY",
    "DirectoryEntry",
    "DirectoryNode",
    "FileEntry",
    "FileRecord",
    "INDEX_FORMAT_VERSION",
    "Index",
    "IndexBuildError",
    "IndexDocumentError",
    "IndexManager",
    "IndexSchemaUnsupportedError",
    "IndexStatus",
    "PROJECT_MAP_FILENAME",
    "RefreshResult",
    "ScanCandidate",
    "ScanIOError",
    "ScannedFile",
    "build_index",
    "build_project_index",
    "classify_category",
    "classify_file",
    "discover_component_files",
    "file_name",
    "is_test_file",
    "scan_project",
    "strip_extension",
    "stripped_file_name",
]
