"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILENAME = "reactgen.toml"
DEFAULT_DATA_DIR_NAME = ".reactgen"

MAX_SCAN_WORKERS_CAP = 64
MAX_STALENESS_SECONDS_CAP = 24 * 60 * 60

DEFAULT_SCAN_ROOTS = ("src", "components", "app")
DEFAULT_SOURCE_EXTENSIONS = (".tsx", ".jsx")
DEFAULT_EXCLUDED_DIRS = ("node_modules", "dist", ".next", "build")
DEFAULT_MAX_WORKERS = 8
DEFAULT_STALENESS_SECONDS = 5 * 60


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Deterministic scanning settings."""

    roots: tuple[str, ...] = DEFAULT_SCAN_ROOTS
    extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    max_workers: int = DEFAULT_MAX_WORKERS


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """Persisted index reuse settings."""

    staleness_seconds: int = DEFAULT_STALENESS_SECONDS


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Fully merged application configuration."""

    project_root: Path
    data_dir: Path
    scan: ScanConfig
    cache: CacheConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "project_root": str(self.project_root),
            "data_dir": str(self.data_dir),
            "scan": {
                "roots": list(self.scan.roots),
                "extensions": list(self.scan.extensions),
                "excluded_dirs": list(self.scan.excluded_dirs),
                "max_workers": self.scan.max_workers,
            },
            "cache": {
                "staleness_seconds": self.cache.staleness_seconds,
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    data_dir: Path | None = None
    staleness_seconds: int | None = None
    max_workers: int | None = None


def default_config(project_root: Path) -> AppConfig:
    """Build default config for a given project root."""
    resolved_root = project_root.resolve()
    return AppConfig(
        project_root=resolved_root,
        data_dir=resolved_root / DEFAULT_DATA_DIR_NAME,
        scan=ScanConfig(),
        cache=CacheConfig(),
    )


def load_project_config_file(project_root: Path) -> dict[str, object]:
    """Load optional reactgen.toml from the project root."""
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILENAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item:
            raise ValueError(
                f"Config field '{section}.{field}' must contain only non-empty strings."
            )
        output.append(item)
    return tuple(output)


def _scan_roots(value: object) -> tuple[str, ...]:
    roots = _tuple_of_strings(value, "scan", "roots")
    normalized: list[str] = []
    for root in roots:
        candidate = root.replace("\\", "/").strip("/")
        parts = candidate.split("/")
        if root.startswith("/") or not candidate or any(part == ".." for part in parts):
            raise ValueError(
                "Config field 'scan.roots' must contain project-relative paths without '..'."
            )
        normalized.append(candidate)
    return tuple(normalized)


def _extensions(value: object) -> tuple[str, ...]:
    extensions = _tuple_of_strings(value, "scan", "extensions")
    for extension in extensions:
        if not extension.startswith(".") or len(extension) < 2:
            raise ValueError("Config field 'scan.extensions' entries must start with '.'.")
    return extensions


def merge_config(
    base: AppConfig, project_payload: dict[str, object], overrides: CliOverrides
) -> AppConfig:
    """Merge defaults, project config, then CLI/startup overrides."""
    scan_payload = _get_table(project_payload, "scan")
    cache_payload = _get_table(project_payload, "cache")

    roots = base.scan.roots
    if "roots" in scan_payload:
        roots = _scan_roots(scan_payload["roots"])
    extensions = base.scan.extensions
    if "extensions" in scan_payload:
        extensions = _extensions(scan_payload["extensions"])
    excluded_dirs = base.scan.excluded_dirs
    if "excluded_dirs" in scan_payload:
        excluded_dirs = _tuple_of_strings(scan_payload["excluded_dirs"], "scan", "excluded_dirs")
    max_workers = _optional_positive_int_with_cap(
        scan_payload.get("max_workers"),
        "scan.max_workers",
        base.scan.max_workers,
        MAX_SCAN_WORKERS_CAP,
    )
    staleness_seconds = _optional_positive_int_with_cap(
        cache_payload.get("staleness_seconds"),
        "cache.staleness_seconds",
        base.cache.staleness_seconds,
        MAX_STALENESS_SECONDS_CAP,
    )

    merged = AppConfig(
        project_root=base.project_root,
        data_dir=base.data_dir,
        scan=ScanConfig(
            roots=roots,
            extensions=extensions,
            excluded_dirs=excluded_dirs,
            max_workers=max_workers,
        ),
        cache=CacheConfig(staleness_seconds=staleness_seconds),
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: AppConfig, overrides: CliOverrides) -> AppConfig:
    """Apply startup overrides at highest precedence."""
    max_workers = _optional_positive_int_with_cap(
        overrides.max_workers,
        "overrides.max_workers",
        config.scan.max_workers,
        MAX_SCAN_WORKERS_CAP,
    )
    staleness_seconds = _optional_positive_int_with_cap(
        overrides.staleness_seconds,
        "overrides.staleness_seconds",
        config.cache.staleness_seconds,
        MAX_STALENESS_SECONDS_CAP,
    )
    data_dir = overrides.data_dir or config.data_dir
    return AppConfig(
        project_root=config.project_root,
        data_dir=data_dir.resolve(),
        scan=ScanConfig(
            roots=config.scan.roots,
            extensions=config.scan.extensions,
            excluded_dirs=config.scan.excluded_dirs,
            max_workers=max_workers,
        ),
        cache=CacheConfig(staleness_seconds=staleness_seconds),
    )


def load_effective_config(project_root: Path, overrides: CliOverrides | None = None) -> AppConfig:
    """Load effective config using merge order defaults -> project config -> overrides."""
    resolved_root = project_root.resolve()
    base = default_config(resolved_root)
    payload = load_project_config_file(resolved_root)
    return merge_config(base, payload, overrides or CliOverrides())


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value
