"""Reference resolution and completion."""

from .completion import (
    KIND_FILE,
    KIND_FOLDER,
    KIND_TEMPLATE,
    CompletionToken,
    complete,
    complete_file,
    complete_folder,
    complete_template,
    complete_token,
    recognize_token,
)
from .engine import ReferenceEngine
from .resolver import find_file_by_name, get_files_in_folder, resolve_reference
from .templates import TEMPLATE_CATALOG, family_variants, is_known_template, template_family

__all__ = [
    "CompletionToken",
    "KIND_FILE",
    "KIND_FOLDER",
    "KIND_TEMPLATE",
    "ReferenceEngine",
    "TEMPLATE_CATALOG",
    "complete",
    "complete_file",
    "complete_folder",
    "complete_template",
    "complete_token",
    "find_file_by_name",
    "get_files_in_folder",
    "family_variants",
    "is_known_template",
    "recognize_token",
    "resolve_reference",
    "template_family",
]
