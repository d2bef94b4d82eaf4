"""JSONL audit trail of slash commands typed into the shell."""

from __future__ import annotations

import json
import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

AUDIT_FILENAME = "audit.jsonl"

# References and filters are short and useful verbatim; other text is summarized.
_VERBATIM_ARGUMENTS = frozenset({"reference", "filter", "file", "command"})

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class AuditEvent:
    """Outcome of one shell command as written to the audit log."""

    timestamp: str
    command: str
    ok: bool
    error_code: str | None
    metadata: dict[str, object]

    @classmethod
    def for_command(
        cls,
        command: str,
        arguments: dict[str, object],
        ok: bool,
        error_code: str | None = None,
    ) -> AuditEvent:
        """Stamp a command outcome and sanitize its arguments."""
        return cls(
            timestamp=utc_timestamp(),
            command=command,
            ok=ok,
            error_code=error_code,
            metadata=sanitize_arguments(arguments),
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True)


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_arguments(arguments: dict[str, object]) -> dict[str, object]:
    """Keep references, filters and scalars; describe anything else by shape only."""
    sanitized: dict[str, object] = {}
    for key, value in sorted(arguments.items()):
        if (key in _VERBATIM_ARGUMENTS and isinstance(value, str)) or _is_scalar(value):
            sanitized[key] = value
        else:
            sanitized.update(_summarize(key, value))
    return sanitized


def _is_scalar(value: object) -> bool:
    return value is None or isinstance(value, (bool, int, float))


def _summarize(key: str, value: object) -> dict[str, object]:
    if isinstance(value, str):
        return {f"{key}_present": True, f"{key}_length": len(value)}
    if isinstance(value, (list, tuple)):
        return {f"{key}_type": "list", f"{key}_length": len(value)}
    if isinstance(value, dict):
        return {f"{key}_type": "dict", f"{key}_keys": sorted(str(name) for name in value)}
    return {f"{key}_type": type(value).__name__}


class JsonlAuditLogger:
    """Command log stored as one JSON object per line under the data directory."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def append(self, event: AuditEvent) -> None:
        """Append one event; the data directory is created on first write."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(event.to_json())
            handle.write("\n")

    def read(
        self,
        since: str | None = None,
        limit: int = 50,
        command: str | None = None,
    ) -> list[dict[str, object]]:
        """Return the newest ``limit`` events, optionally from ``since`` on or for one command."""
        if limit < 1:
            return []
        recent: deque[dict[str, object]] = deque(maxlen=limit)
        for record in self._records():
            if since is not None and str(record.get("timestamp", "")) < since:
                continue
            if command is not None and record.get("command") != command:
                continue
            recent.append(record)
        return list(recent)

    def _records(self) -> Iterator[dict[str, object]]:
        if not self._path.exists():
            return
        with self._path.open("r", encoding="utf-8") as handle:
            for number, line in enumerate(handle, start=1):
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    logger.debug("Skipping malformed audit line %d in %s", number, self._path)
                    continue
                if isinstance(record, dict):
                    yield record
