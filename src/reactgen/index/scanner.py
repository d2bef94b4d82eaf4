"""Deterministic discovery and reading of component source files."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from reactgen.config import ScanConfig
from reactgen.index.models import ScanCandidate, ScannedFile


class ScanIOError(Exception):
    """Raised when a file or directory below a scan root cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def discover_component_files(project_root: Path, config: ScanConfig) -> list[ScanCandidate]:
    """Return candidate files below the configured roots in scan order."""
    root = project_root.resolve()
    excluded = set(config.excluded_dirs)
    candidates: list[ScanCandidate] = []
    seen: set[str] = set()
    for scan_root in config.roots:
        start = root / scan_root
        if not start.is_dir() or start.is_symlink():
            continue
        found = _walk_root(
            root=root,
            start=start,
            extensions=config.extensions,
            excluded_dir_names=excluded,
        )
        found.sort(key=lambda item: item.relative_path)
        for candidate in found:
            if candidate.relative_path in seen:
                continue
            seen.add(candidate.relative_path)
            candidates.append(candidate)
    return candidates


def _walk_root(
    *,
    root: Path,
    start: Path,
    extensions: tuple[str, ...],
    excluded_dir_names: set[str],
) -> list[ScanCandidate]:
    """Walk one subtree with pruning for excluded directory names."""
    candidates: list[ScanCandidate] = []
    stack: list[Path] = [start]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                ordered_entries = sorted(entries, key=lambda item: item.name)
        except OSError as error:
            raise ScanIOError(_relative(root, current), error.strerror or str(error)) from error
        for entry in reversed(ordered_entries):
            full_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                if entry.name in excluded_dir_names:
                    continue
                stack.append(full_path)
                continue
            if not entry.is_file(follow_symlinks=False):
                continue
            if not entry.name.endswith(extensions):
                continue
            candidates.append(
                ScanCandidate(
                    relative_path=_relative(root, full_path),
                    absolute_path=full_path,
                )
            )
    return candidates


def count_lines(content: str) -> int:
    """Count lines as newline-separated pieces; empty content is one line."""
    return len(content.split("\n"))


def read_scanned_file(candidate: ScanCandidate) -> ScannedFile:
    """Read one candidate, raising ScanIOError when it cannot be read."""
    try:
        content = _read_text(candidate.absolute_path)
    except OSError as error:
        raise ScanIOError(candidate.relative_path, error.strerror or str(error)) from error
    return ScannedFile(
        relative_path=candidate.relative_path,
        absolute_path=candidate.absolute_path,
        content=content,
        line_count=count_lines(content),
    )


def scan_project(project_root: Path, config: ScanConfig) -> list[ScannedFile]:
    """Discover and read every component file; any read failure aborts the scan."""
    candidates = discover_component_files(project_root, config)
    if not candidates:
        return []
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        return list(executor.map(read_scanned_file, candidates))


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def _relative(root: Path, path: Path) -> str:
    return path.relative_to(root).as_posix()
