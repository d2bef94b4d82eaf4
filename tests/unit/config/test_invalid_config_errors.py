from __future__ import annotations

from pathlib import Path

import pytest

from reactgen.config import CliOverrides, load_effective_config
from reactgen.shell import create_shell


def test_invalid_worker_type_raises_value_error(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text(
        "\n".join(["[scan]", 'max_workers = "many"']),
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="scan.max_workers"):
        create_shell(project_root=str(tmp_path))


def test_invalid_section_type_raises_value_error(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text('scan = "not-a-table"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="section 'scan'"):
        load_effective_config(tmp_path)


def test_staleness_above_cap_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text(
        "[cache]\nstaleness_seconds = 90000\n", encoding="utf-8"
    )

    with pytest.raises(ValueError, match="cache.staleness_seconds"):
        load_effective_config(tmp_path)


def test_boolean_is_not_accepted_as_integer(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="overrides.max_workers"):
        load_effective_config(tmp_path, CliOverrides(max_workers=True))


@pytest.mark.parametrize("root", ["../outside", "/abs/src", "src/../.."])
def test_scan_roots_must_stay_inside_project(tmp_path: Path, root: str) -> None:
    (tmp_path / "reactgen.toml").write_text(f'[scan]\nroots = ["{root}"]\n', encoding="utf-8")

    with pytest.raises(ValueError, match="scan.roots"):
        load_effective_config(tmp_path)


def test_extensions_must_start_with_dot(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text('[scan]\nextensions = ["tsx"]\n', encoding="utf-8")

    with pytest.raises(ValueError, match="scan.extensions"):
        load_effective_config(tmp_path)
