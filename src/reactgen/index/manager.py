"""Persistent index storage, cache reuse and atomic publication."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from reactgen.adapters import ExtractorRegistry, build_extractor_registry
from reactgen.config import CacheConfig, ScanConfig
from reactgen.index.builder import build_project_index
from reactgen.index.document import (
    IndexDocumentError,
    IndexSchemaUnsupportedError,
    index_from_document,
    index_to_document,
)
from reactgen.index.models import Index

PROJECT_MAP_FILENAME = "project-map.json"

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class IndexStatus:
    """Current index status snapshot."""

    index_status: str
    built_at: str | None
    file_count: int
    component_count: int


@dataclass(slots=True, frozen=True)
class RefreshResult:
    """Outcome of one refresh request."""

    source: str
    index: Index
    published: bool
    age_seconds: float | None
    duration_ms: int


class IndexManager:
    """Owns the current Index and its persisted document."""

    def __init__(
        self,
        project_root: Path,
        data_dir: Path,
        scan_config: ScanConfig,
        cache_config: CacheConfig,
        registry: ExtractorRegistry | None = None,
    ) -> None:
        self._project_root = project_root.resolve()
        self._data_dir = data_dir.resolve()
        self._scan_config = scan_config
        self._cache_config = cache_config
        self._registry = registry or build_extractor_registry()
        self._map_path = self._data_dir / PROJECT_MAP_FILENAME
        self._current: Index | None = None

    @property
    def map_path(self) -> Path:
        """Return on-disk path of the persisted index document."""
        return self._map_path

    @property
    def current(self) -> Index | None:
        """Return the published Index, if any."""
        return self._current

    def status(self) -> IndexStatus:
        """Return status of the published Index."""
        index = self._current
        if index is None:
            return IndexStatus(
                index_status="not_indexed",
                built_at=None,
                file_count=0,
                component_count=0,
            )
        return IndexStatus(
            index_status="ready",
            built_at=index.built_at,
            file_count=len(index.all_files),
            component_count=index.component_count(),
        )

    def refresh(self, force: bool = False, now: datetime | None = None) -> RefreshResult:
        """Publish a fresh cached Index, or scan, persist and publish a new one.

        A scan that finds no files is returned unpublished and is not persisted.
        ScanIOError propagates and leaves the current Index untouched.
        """
        start = time.perf_counter()
        moment = now or datetime.now(tz=UTC)
        if not force:
            cached = self.load_fresh_cached(moment)
            if cached is not None:
                self._publish(cached)
                logger.info("Reusing cached index from %s", self._map_path)
                return RefreshResult(
                    source="cache",
                    index=cached,
                    published=True,
                    age_seconds=index_age_seconds(cached, moment),
                    duration_ms=_elapsed_ms(start),
                )

        index = build_project_index(self._project_root, self._scan_config, self._registry)
        if not index.all_files:
            logger.info("Scan of %s found no component files", self._project_root)
            return RefreshResult(
                source="scan",
                index=index,
                published=False,
                age_seconds=None,
                duration_ms=_elapsed_ms(start),
            )
        self.write(index)
        self._publish(index)
        logger.info("Indexed %d files under %s", len(index.all_files), self._project_root)
        return RefreshResult(
            source="scan",
            index=index,
            published=True,
            age_seconds=0.0,
            duration_ms=_elapsed_ms(start),
        )

    def load(self) -> Index | None:
        """Load the persisted Index, raising on schema or structure problems."""
        if not self._map_path.exists():
            return None
        with self._map_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return index_from_document(payload)

    def load_fresh_cached(self, now: datetime | None = None) -> Index | None:
        """Return the persisted Index when readable and inside the staleness window."""
        try:
            index = self.load()
        except (OSError, json.JSONDecodeError, IndexDocumentError) as error:
            logger.info("Ignoring unreadable cached index %s: %s", self._map_path, error)
            return None
        except IndexSchemaUnsupportedError as error:
            logger.info(
                "Ignoring cached index with format %s (expected %s)", error.found, error.expected
            )
            return None
        if index is None:
            return None
        age = index_age_seconds(index, now or datetime.now(tz=UTC))
        if age is None or age < 0 or age > self._cache_config.staleness_seconds:
            return None
        return index

    def write(self, index: Index) -> None:
        """Persist an Index document atomically."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._atomic_write_json(self._map_path, index_to_document(index))

    def _publish(self, index: Index) -> None:
        self._current = index

    @staticmethod
    def _atomic_write_json(path: Path, payload: dict[str, object]) -> None:
        tmp = path.with_suffix(path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
            handle.write("\n")
        tmp.replace(path)


def index_age_seconds(index: Index, now: datetime) -> float | None:
    """Return seconds elapsed since the Index was built, or None when unparseable."""
    try:
        built = datetime.fromisoformat(index.built_at)
    except ValueError:
        return None
    if built.tzinfo is None:
        built = built.replace(tzinfo=UTC)
    return (now - built).total_seconds()


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
