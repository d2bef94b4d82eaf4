"""Reference resolution against an immutable Index."""

from __future__ import annotations

import re

from reactgen.index.models import (
    DirectoryNode,
    FileEntry,
    FileRecord,
    Index,
    file_name,
    strip_extension,
    stripped_file_name,
)

_REFERENCE_RE = re.compile(r"(\.[\w.]+)?#(\w+)", re.ASCII)


def resolve_reference(index: Index, reference: str) -> str | None:
    """Resolve ``#name`` or ``.seg.seg#name`` to a relative path, or None."""
    match = _REFERENCE_RE.fullmatch(reference)
    if match is None:
        return None
    folder, name = match.group(1), match.group(2)
    if folder is None:
        return _first_by_stripped_name(index, name)

    segments = folder[1:].split(".")
    if any(not segment for segment in segments):
        return None
    node = index.walk(segments)
    if node is None:
        return None
    for path in node.file_paths():
        if stripped_file_name(path) == name:
            return path
    return None


def _first_by_stripped_name(index: Index, name: str) -> str | None:
    for path in index.all_files:
        if stripped_file_name(path) == name:
            return path
    return None


def get_files_in_folder(index: Index, dotted_path: str) -> list[str]:
    """Return sorted stripped filenames directly inside a dotted folder path."""
    segments = [segment for segment in dotted_path.split(".") if segment]
    node = index.walk(segments)
    if node is None:
        return []
    return sorted(stripped_file_name(path) for path in node.file_paths())


def find_file_by_name(index: Index, name: str) -> FileRecord | None:
    """Depth-first search for a file by full filename or extension-less name."""
    return _search_node(index, index.root, name, strip_extension(name))


def _search_node(index: Index, node: DirectoryNode, name: str, target: str) -> FileRecord | None:
    for entry in node.children.values():
        if isinstance(entry, FileEntry):
            leaf = file_name(entry.relative_path)
            if leaf == name or strip_extension(leaf) == target:
                return index.files[entry.relative_path]
            continue
        found = _search_node(index, index.node(entry.node_id), name, target)
        if found is not None:
            return found
    return None
