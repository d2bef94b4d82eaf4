"""Typed models for the component index."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

CATEGORY_COMPONENT = "component"
CATEGORY_UTILITY = "utility"
CATEGORY_TEST = "test"

ROOT_NODE_ID = 0

_SOURCE_EXTENSION_RE = re.compile(r"\.(tsx?|jsx?)\Z")


def file_name(relative_path: str) -> str:
    """Return the final segment of a forward-slash path."""
    return relative_path.rsplit("/", 1)[-1]


def strip_extension(name: str) -> str:
    """Remove a trailing TS/JS source extension from a filename."""
    return _SOURCE_EXTENSION_RE.sub("", name)


def stripped_file_name(relative_path: str) -> str:
    """Return the final path segment without its source extension."""
    return strip_extension(file_name(relative_path))


@dataclass(slots=True, frozen=True)
class ScanCandidate:
    """File located by the scanner, not yet read."""

    relative_path: str
    absolute_path: Path


@dataclass(slots=True, frozen=True)
class ScannedFile:
    """Raw file content produced by the scanner."""

    relative_path: str
    absolute_path: Path
    content: str
    line_count: int


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Represents a file tracked by the index."""

    relative_path: str
    absolute_path: str
    line_count: int
    category: str
    exports: tuple[str, ...]
    imports: tuple[str, ...]
    reverse_usage: tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        return file_name(self.relative_path)

    @property
    def stripped_name(self) -> str:
        return stripped_file_name(self.relative_path)


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Tree entry pointing at a child directory node."""

    node_id: int


@dataclass(slots=True, frozen=True)
class FileEntry:
    """Tree entry pointing at a file record."""

    relative_path: str


TreeEntry = DirectoryEntry | FileEntry


@dataclass(slots=True, frozen=True)
class DirectoryNode:
    """One directory in the index tree; children keep insertion order."""

    node_id: int
    children: Mapping[str, TreeEntry]

    def directory_names(self) -> list[str]:
        """Return sorted names of child directories."""
        return sorted(
            name for name, entry in self.children.items() if isinstance(entry, DirectoryEntry)
        )

    def file_paths(self) -> list[str]:
        """Return relative paths of direct file children in insertion order."""
        return [
            entry.relative_path
            for entry in self.children.values()
            if isinstance(entry, FileEntry)
        ]


@dataclass(slots=True, frozen=True)
class Index:
    """Immutable snapshot of one project scan."""

    format_version: int
    built_at: str
    root_path: str
    nodes: tuple[DirectoryNode, ...]
    files: Mapping[str, FileRecord]
    all_files: tuple[str, ...]
    all_exported_names: tuple[str, ...]

    @property
    def root(self) -> DirectoryNode:
        return self.nodes[ROOT_NODE_ID]

    def node(self, node_id: int) -> DirectoryNode:
        """Return a directory node by arena id."""
        return self.nodes[node_id]

    def file(self, relative_path: str) -> FileRecord | None:
        """Return the record stored under a relative path."""
        return self.files.get(relative_path)

    def child_directory(self, node: DirectoryNode, name: str) -> DirectoryNode | None:
        """Return the named child directory, or None when missing or a file."""
        entry = node.children.get(name)
        if not isinstance(entry, DirectoryEntry):
            return None
        return self.nodes[entry.node_id]

    def walk(self, segments: list[str]) -> DirectoryNode | None:
        """Descend one directory per segment from the root."""
        current = self.root
        for segment in segments:
            child = self.child_directory(current, segment)
            if child is None:
                return None
            current = child
        return current

    def leaf_paths(self) -> list[str]:
        """Enumerate every file leaf in depth-first insertion order."""
        output: list[str] = []
        stack: list[DirectoryNode] = [self.root]
        while stack:
            current = stack.pop()
            pending: list[DirectoryNode] = []
            for entry in current.children.values():
                if isinstance(entry, FileEntry):
                    output.append(entry.relative_path)
                else:
                    pending.append(self.nodes[entry.node_id])
            stack.extend(reversed(pending))
        return output

    def component_count(self) -> int:
        """Count records classified as components."""
        return sum(1 for record in self.files.values() if record.category == CATEGORY_COMPONENT)
