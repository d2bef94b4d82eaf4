"""Index assembly from per-file records."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from pathlib import Path
from types import MappingProxyType

from reactgen.adapters import ExtractorRegistry, build_extractor_registry
from reactgen.config import ScanConfig
from reactgen.index.classifier import classify_file
from reactgen.index.models import (
    CATEGORY_COMPONENT,
    ROOT_NODE_ID,
    DirectoryEntry,
    DirectoryNode,
    FileEntry,
    FileRecord,
    Index,
    ScanCandidate,
    TreeEntry,
)
from reactgen.index.scanner import discover_component_files, read_scanned_file

INDEX_FORMAT_VERSION = 1


class IndexBuildError(ValueError):
    """Raised when records cannot be folded into one consistent tree."""


def build_index(
    records: Iterable[FileRecord],
    root_path: str,
    built_at: str | None = None,
) -> Index:
    """Fold records, in scan order, into one immutable Index."""
    ordered = list(records)
    children: list[dict[str, TreeEntry]] = [{}]
    files: dict[str, FileRecord] = {}
    all_files: list[str] = []
    exported_names: list[str] = []

    for record in ordered:
        if record.relative_path in files:
            raise IndexBuildError(f"Duplicate relative path: {record.relative_path}")
        segments = record.relative_path.split("/")
        node_id = ROOT_NODE_ID
        for segment in segments[:-1]:
            entry = children[node_id].get(segment)
            if entry is None:
                entry = DirectoryEntry(node_id=len(children))
                children.append({})
                children[node_id][segment] = entry
            elif isinstance(entry, FileEntry):
                raise IndexBuildError(
                    f"Path {record.relative_path} descends through file {entry.relative_path}"
                )
            node_id = entry.node_id
        leaf = segments[-1]
        if leaf in children[node_id]:
            raise IndexBuildError(f"Path {record.relative_path} collides with a directory")
        children[node_id][leaf] = FileEntry(relative_path=record.relative_path)
        files[record.relative_path] = record
        all_files.append(record.relative_path)
        if record.category == CATEGORY_COMPONENT:
            exported_names.extend(record.exports)

    nodes = tuple(
        DirectoryNode(node_id=node_id, children=MappingProxyType(node_children))
        for node_id, node_children in enumerate(children)
    )
    return Index(
        format_version=INDEX_FORMAT_VERSION,
        built_at=built_at if built_at is not None else utc_now_iso(),
        root_path=root_path,
        nodes=nodes,
        files=MappingProxyType(files),
        all_files=tuple(all_files),
        all_exported_names=tuple(exported_names),
    )


def build_project_index(
    project_root: Path,
    config: ScanConfig,
    registry: ExtractorRegistry | None = None,
) -> Index:
    """Scan, read and classify files concurrently, then build the Index."""
    root = project_root.resolve()
    active_registry = registry or build_extractor_registry()
    candidates = discover_component_files(root, config)

    def index_file(candidate: ScanCandidate) -> FileRecord:
        return classify_file(read_scanned_file(candidate), active_registry)

    records: list[FileRecord] = []
    if candidates:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            records = list(executor.map(index_file, candidates))
    return build_index(records, root_path=str(root))


def utc_now_iso() -> str:
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
