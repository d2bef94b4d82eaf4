from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/reactgen/shell.py",
        "src/reactgen/session.py",
        "src/reactgen/config.py",
        "src/reactgen/commands/__init__.py",
        "src/reactgen/index/__init__.py",
        "src/reactgen/adapters/__init__.py",
        "src/reactgen/query/__init__.py",
        "src/reactgen/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
