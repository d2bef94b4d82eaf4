from __future__ import annotations

from pathlib import Path

from reactgen.config import CliOverrides, load_effective_config
from reactgen.shell import create_shell


def test_merge_order_defaults_then_project_then_cli(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text(
        "\n".join(
            [
                "[scan]",
                'roots = ["src", "lib"]',
                "max_workers = 4",
                "",
                "[cache]",
                "staleness_seconds = 60",
            ]
        ),
        encoding="utf-8",
    )
    overrides = CliOverrides(max_workers=2)
    config = load_effective_config(tmp_path, overrides)
    effective = config.to_public_dict()

    assert effective["scan"]["roots"] == ["src", "lib"]
    assert effective["scan"]["max_workers"] == 2
    assert effective["scan"]["extensions"] == [".tsx", ".jsx"]
    assert effective["cache"]["staleness_seconds"] == 60


def test_defaults_apply_without_project_config(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.project_root == tmp_path.resolve()
    assert config.data_dir == tmp_path.resolve() / ".reactgen"
    assert config.scan.roots == ("src", "components", "app")
    assert config.scan.excluded_dirs == ("node_modules", "dist", ".next", "build")
    assert config.cache.staleness_seconds == 300


def test_data_dir_override_has_highest_precedence(tmp_path: Path) -> None:
    custom_data_dir = tmp_path / ".custom_data"
    shell = create_shell(
        project_root=str(tmp_path),
        cli_overrides=CliOverrides(data_dir=custom_data_dir),
    )

    effective = shell.session.config.to_public_dict()
    assert effective["data_dir"] == str(custom_data_dir.resolve())
    assert shell.audit_logger.path == custom_data_dir.resolve() / "audit.jsonl"


def test_unknown_tables_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "reactgen.toml").write_text("[llm]\nmodel = 'x'\n", encoding="utf-8")

    config = load_effective_config(tmp_path)

    assert config.scan.max_workers == 8
