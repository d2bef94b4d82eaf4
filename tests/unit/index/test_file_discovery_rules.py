from __future__ import annotations

from pathlib import Path

import pytest

from reactgen.config import ScanConfig
from reactgen.index import ScanIOError, discover_component_files, scan_project
from reactgen.index.scanner import count_lines


def _write(path: Path, text: str = "export const X = 1;\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_discovery_walks_roots_in_order_and_sorts_within_each_root(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "b" / "Z.tsx")
    _write(tmp_path / "src" / "A.tsx")
    _write(tmp_path / "src" / "b" / "Y.jsx")
    _write(tmp_path / "app" / "Page.tsx")
    _write(tmp_path / "components" / "Card.tsx")

    found = discover_component_files(tmp_path, ScanConfig())

    assert [item.relative_path for item in found] == [
        "src/A.tsx",
        "src/b/Y.jsx",
        "src/b/Z.tsx",
        "components/Card.tsx",
        "app/Page.tsx",
    ]


def test_discovery_skips_excluded_dirs_and_other_extensions(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "node_modules" / "lib" / "Dep.tsx")
    _write(tmp_path / "src" / "build" / "Out.tsx")
    _write(tmp_path / "src" / "util.ts")
    _write(tmp_path / "src" / "App.tsx.bak")
    _write(tmp_path / "src" / "styles.css")
    _write(tmp_path / "src" / "App.tsx")
    _write(tmp_path / "lib" / "Outside.tsx")

    found = discover_component_files(tmp_path, ScanConfig())

    assert [item.relative_path for item in found] == ["src/App.tsx"]


def test_missing_roots_yield_no_candidates(tmp_path: Path) -> None:
    assert discover_component_files(tmp_path, ScanConfig()) == []
    assert scan_project(tmp_path, ScanConfig()) == []


def test_configured_extensions_are_respected(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "util.ts")
    _write(tmp_path / "src" / "App.tsx")
    config = ScanConfig(roots=("src",), extensions=(".ts",))

    found = discover_component_files(tmp_path, config)

    assert [item.relative_path for item in found] == ["src/util.ts"]


def test_scan_project_reads_content_and_counts_lines(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "A.tsx", "line one\nline two\n")

    scanned = scan_project(tmp_path, ScanConfig(max_workers=2))

    assert len(scanned) == 1
    assert scanned[0].content == "line one\nline two\n"
    assert scanned[0].line_count == 3
    assert scanned[0].absolute_path == (tmp_path / "src" / "A.tsx").resolve()


def test_count_lines_splits_on_newline() -> None:
    assert count_lines("") == 1
    assert count_lines("a") == 1
    assert count_lines("a\nb") == 2
    assert count_lines("a\r\nb\n") == 3


def test_unreadable_file_raises_scan_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path / "src" / "A.tsx")

    def deny(path: Path) -> str:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("reactgen.index.scanner._read_text", deny)

    with pytest.raises(ScanIOError) as excinfo:
        scan_project(tmp_path, ScanConfig())

    assert excinfo.value.path == "src/A.tsx"
    assert excinfo.value.reason == "Permission denied"
