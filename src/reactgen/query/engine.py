"""Query facade bound to whichever Index is currently published."""

from __future__ import annotations

from collections.abc import Callable

from reactgen.index.models import FileRecord, Index
from reactgen.query.completion import CompletionToken, complete, recognize_token
from reactgen.query.resolver import find_file_by_name, get_files_in_folder, resolve_reference
from reactgen.query.templates import TEMPLATE_CATALOG


class ReferenceEngine:
    """Completion and resolution against the current Index snapshot."""

    def __init__(
        self,
        index_provider: Callable[[], Index | None],
        templates: tuple[str, ...] = TEMPLATE_CATALOG,
    ) -> None:
        self._index_provider = index_provider
        self._templates = templates

    @property
    def templates(self) -> tuple[str, ...]:
        return self._templates

    def recognize(self, line: str, cursor: int | None = None) -> CompletionToken | None:
        return recognize_token(line, cursor)

    def complete(self, line: str, cursor: int | None = None) -> list[str]:
        """Return completion candidates for the token before the cursor."""
        return complete(self._index_provider(), line, cursor, self._templates)

    def resolve_reference(self, reference: str) -> str | None:
        """Resolve a file reference to its relative path."""
        index = self._index_provider()
        if index is None:
            return None
        return resolve_reference(index, reference)

    def get_files_in_folder(self, dotted_path: str) -> list[str]:
        index = self._index_provider()
        if index is None:
            return []
        return get_files_in_folder(index, dotted_path)

    def find_file(self, name: str) -> FileRecord | None:
        index = self._index_provider()
        if index is None:
            return None
        return find_file_by_name(index, name)
