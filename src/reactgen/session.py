"""Per-project state shared by the shell and its commands."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from reactgen.adapters import ExtractorRegistry
from reactgen.config import AppConfig
from reactgen.index import Index, IndexManager, RefreshResult
from reactgen.query import ReferenceEngine

PACKAGE_JSON = "package.json"


class ProjectSession:
    """Holds configuration, the index manager and the query engine for one project."""

    def __init__(self, config: AppConfig, registry: ExtractorRegistry | None = None) -> None:
        self.config = config
        self.manager = IndexManager(
            project_root=config.project_root,
            data_dir=config.data_dir,
            scan_config=config.scan,
            cache_config=config.cache,
            registry=registry,
        )
        self.engine = ReferenceEngine(lambda: self.manager.current)
        self.project_name: str | None = None

    @property
    def project_root(self) -> Path:
        return self.config.project_root

    @property
    def index(self) -> Index | None:
        return self.manager.current

    def requires_init(self) -> bool:
        return self.manager.current is None

    def has_package_json(self) -> bool:
        return (self.project_root / PACKAGE_JSON).is_file()

    def refresh(self, force: bool = False, now: datetime | None = None) -> RefreshResult:
        """Refresh the index and, once published, read the project name."""
        result = self.manager.refresh(force=force, now=now)
        if result.published:
            self.project_name = read_project_name(self.project_root)
        return result

    def map_display_path(self) -> str:
        """Return the persisted map path relative to the project root when possible."""
        map_path = self.manager.map_path
        try:
            return map_path.relative_to(self.project_root).as_posix()
        except ValueError:
            return str(map_path)


def read_project_name(project_root: Path) -> str | None:
    """Return the ``name`` field of package.json, or None when unavailable."""
    try:
        with (project_root / PACKAGE_JSON).open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    name = payload.get("name")
    if isinstance(name, str) and name:
        return name
    return None
