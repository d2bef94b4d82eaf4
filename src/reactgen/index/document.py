"""Conversion between an Index and its persisted JSON document."""

from __future__ import annotations

from dataclasses import dataclass

from reactgen.index.builder import INDEX_FORMAT_VERSION, IndexBuildError, build_index
from reactgen.index.models import (
    CATEGORY_COMPONENT,
    CATEGORY_TEST,
    CATEGORY_UTILITY,
    DirectoryNode,
    FileEntry,
    FileRecord,
    Index,
)

_FILE_TAG = "relative_path"
_CATEGORIES = {CATEGORY_COMPONENT, CATEGORY_TEST, CATEGORY_UTILITY}


@dataclass(slots=True, frozen=True)
class IndexSchemaUnsupportedError(Exception):
    """Raised when a stored index format does not match the supported version."""

    found: int
    expected: int


class IndexDocumentError(ValueError):
    """Raised when a stored index document is structurally invalid."""


def index_to_document(index: Index) -> dict[str, object]:
    """Serialize an Index to a JSON-compatible mapping."""
    return {
        "format_version": index.format_version,
        "built_at": index.built_at,
        "root_path": index.root_path,
        "tree": _node_to_document(index, index.root),
        "all_files": list(index.all_files),
        "all_exported_names": list(index.all_exported_names),
    }


def _node_to_document(index: Index, node: DirectoryNode) -> dict[str, object]:
    output: dict[str, object] = {}
    for name, entry in node.children.items():
        if isinstance(entry, FileEntry):
            output[name] = _record_to_document(index.files[entry.relative_path])
        else:
            output[name] = _node_to_document(index, index.node(entry.node_id))
    return output


def _record_to_document(record: FileRecord) -> dict[str, object]:
    return {
        "relative_path": record.relative_path,
        "absolute_path": record.absolute_path,
        "line_count": record.line_count,
        "category": record.category,
        "exports": list(record.exports),
        "imports": list(record.imports),
        "reverse_usage": list(record.reverse_usage),
    }


def index_from_document(payload: object) -> Index:
    """Load an Index from a parsed JSON document, validating its structure."""
    if not isinstance(payload, dict):
        raise IndexDocumentError("Index document must be an object.")
    version = payload.get("format_version")
    if not isinstance(version, int) or isinstance(version, bool):
        raise IndexSchemaUnsupportedError(found=-1, expected=INDEX_FORMAT_VERSION)
    if version != INDEX_FORMAT_VERSION:
        raise IndexSchemaUnsupportedError(found=version, expected=INDEX_FORMAT_VERSION)

    built_at = _require_str(payload, "built_at")
    root_path = _require_str(payload, "root_path")
    tree = payload.get("tree")
    if not isinstance(tree, dict):
        raise IndexDocumentError("Index field 'tree' must be an object.")
    all_files = _string_tuple(payload.get("all_files"), "all_files")
    all_exported_names = _string_tuple(payload.get("all_exported_names"), "all_exported_names")

    records: dict[str, FileRecord] = {}
    _collect_records(tree, prefix=(), output=records)
    if len(set(all_files)) != len(all_files) or set(all_files) != set(records):
        raise IndexDocumentError("Index field 'all_files' does not match the tree leaves.")

    try:
        rebuilt = build_index(
            (records[path] for path in all_files),
            root_path=root_path,
            built_at=built_at,
        )
    except IndexBuildError as error:
        raise IndexDocumentError(str(error)) from error
    return Index(
        format_version=version,
        built_at=rebuilt.built_at,
        root_path=rebuilt.root_path,
        nodes=rebuilt.nodes,
        files=rebuilt.files,
        all_files=rebuilt.all_files,
        all_exported_names=all_exported_names,
    )


def _collect_records(
    tree: dict[str, object],
    prefix: tuple[str, ...],
    output: dict[str, FileRecord],
) -> None:
    for name, value in tree.items():
        if not isinstance(value, dict):
            raise IndexDocumentError(f"Tree entry '{name}' must be an object.")
        if _FILE_TAG in value:
            expected_path = "/".join((*prefix, name))
            record = _record_from_document(value)
            if record.relative_path != expected_path:
                raise IndexDocumentError(
                    f"Tree entry '{expected_path}' carries path '{record.relative_path}'."
                )
            output[record.relative_path] = record
            continue
        _collect_records(value, (*prefix, name), output)


def _record_from_document(value: dict[str, object]) -> FileRecord:
    relative_path = _require_str(value, "relative_path")
    line_count = value.get("line_count")
    if not isinstance(line_count, int) or isinstance(line_count, bool) or line_count < 0:
        raise IndexDocumentError(f"File '{relative_path}' has an invalid line_count.")
    category = _require_str(value, "category")
    if category not in _CATEGORIES:
        raise IndexDocumentError(f"File '{relative_path}' has an unknown category '{category}'.")
    return FileRecord(
        relative_path=relative_path,
        absolute_path=_require_str(value, "absolute_path"),
        line_count=line_count,
        category=category,
        exports=_string_tuple(value.get("exports"), f"{relative_path}.exports"),
        imports=_string_tuple(value.get("imports"), f"{relative_path}.imports"),
        reverse_usage=_string_tuple(
            value.get("reverse_usage", []), f"{relative_path}.reverse_usage"
        ),
    )


def _require_str(payload: dict[str, object], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise IndexDocumentError(f"Index field '{key}' must be a string.")
    return value


def _string_tuple(value: object, field: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise IndexDocumentError(f"Index field '{field}' must be a list of strings.")
    return tuple(value)
