"""Tab-completion over templates, file names and folder paths."""

from __future__ import annotations

import re
from dataclasses import dataclass

from reactgen.index.models import Index, stripped_file_name
from reactgen.query.templates import TEMPLATE_CATALOG

KIND_TEMPLATE = "template"
KIND_FILE = "file"
KIND_FOLDER = "folder"

_TOKEN_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (KIND_TEMPLATE, re.compile(r"@([A-Za-z0-9:-]*)\Z")),
    (KIND_FILE, re.compile(r"#([A-Za-z0-9_-]*)\Z")),
    (KIND_FOLDER, re.compile(r"\.([A-Za-z0-9._/-]*)\Z")),
)


@dataclass(slots=True, frozen=True)
class CompletionToken:
    """Reference token ending at the cursor."""

    kind: str
    start: int
    text: str

    @property
    def trigger(self) -> str:
        return {KIND_TEMPLATE: "@", KIND_FILE: "#", KIND_FOLDER: "."}[self.kind]

    @property
    def raw(self) -> str:
        """Return the token as typed, trigger included."""
        return self.trigger + self.text


def recognize_token(line: str, cursor: int | None = None) -> CompletionToken | None:
    """Find the reference token that ends at the cursor, if any."""
    end = len(line) if cursor is None else max(0, min(cursor, len(line)))
    before = line[:end]
    for kind, pattern in _TOKEN_PATTERNS:
        match = pattern.search(before)
        if match is not None:
            return CompletionToken(kind=kind, start=match.start(), text=match.group(1))
    return None


def complete(
    index: Index | None,
    line: str,
    cursor: int | None = None,
    templates: tuple[str, ...] = TEMPLATE_CATALOG,
) -> list[str]:
    """Return completion candidates for the token before the cursor."""
    token = recognize_token(line, cursor)
    if token is None:
        return []
    return complete_token(index, token, templates)


def complete_token(
    index: Index | None,
    token: CompletionToken,
    templates: tuple[str, ...] = TEMPLATE_CATALOG,
) -> list[str]:
    if token.kind == KIND_TEMPLATE:
        return complete_template(token.text, templates)
    if index is None:
        return []
    if token.kind == KIND_FILE:
        return complete_file(index, token.text)
    return complete_folder(index, token.text)


def complete_template(prefix: str, templates: tuple[str, ...] = TEMPLATE_CATALOG) -> list[str]:
    """Return ``@``-prefixed catalog entries starting with prefix."""
    return sorted(f"@{name}" for name in templates if name.startswith(prefix))


def complete_file(index: Index, fragment: str) -> list[str]:
    """Return ``#``-prefixed file names containing fragment, ignoring case."""
    needle = fragment.lower()
    names = {
        stripped_file_name(path)
        for path in index.all_files
        if needle in stripped_file_name(path).lower()
    }
    return sorted(f"#{name}" for name in names)


def complete_folder(index: Index, fragment: str) -> list[str]:
    """Return dotted folder paths extending fragment by one directory."""
    parts = fragment.split(".")
    walked, partial = parts[:-1], parts[-1]
    node = index.walk([segment for segment in walked if segment])
    if node is None:
        return []
    prefix = "." + ".".join(walked) + "." if walked else "."
    return [prefix + name for name in node.directory_names() if name.startswith(partial)]
