"""Deterministic lexical scanning helpers for source extractors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LexicalRules:
    """Configurable lexical markers used while masking non-code text."""

    line_comment_prefixes: tuple[str, ...] = ("//",)
    block_comment_pairs: tuple[tuple[str, str], ...] = (("/*", "*/"),)
    string_delimiters: tuple[str, ...] = ("'", '"', "`")
    line_terminated_delimiters: tuple[str, ...] = ("'", '"')
    word_joined_delimiters: tuple[str, ...] = ()
    escape_char: str = "\\"


@dataclass(slots=True, frozen=True)
class BraceScanResult:
    """Result of deterministic brace scanning."""

    unmatched_closing: int
    unclosed_opening: int

    @property
    def balanced(self) -> bool:
        return self.unmatched_closing == 0 and self.unclosed_opening == 0


@dataclass(slots=True, frozen=True)
class MaskedSource:
    """Masked text plus what the masking pass could not close cleanly."""

    text: str
    open_construct: str | None
    cut_strings: int


def mask_comments_and_strings(text: str, rules: LexicalRules | None = None) -> str:
    """Mask comments and strings while preserving original line count and character offsets."""
    return mask_source(text, rules).text


def mask_source(text: str, rules: LexicalRules | None = None) -> MaskedSource:
    """Mask text and report an unterminated block comment or string left open at the end.

    ``cut_strings`` counts line-terminated strings that ran into a newline; in JSX files
    these are usually apostrophes in element text rather than real literals.
    """
    active_rules = rules or LexicalRules()
    line_prefixes = tuple(
        sorted(
            (prefix for prefix in active_rules.line_comment_prefixes if prefix),
            key=len,
            reverse=True,
        )
    )
    block_pairs = tuple(
        sorted(
            ((start, end) for start, end in active_rules.block_comment_pairs if start and end),
            key=lambda pair: len(pair[0]),
            reverse=True,
        )
    )
    string_delimiters = tuple(
        sorted(
            (marker for marker in active_rules.string_delimiters if marker),
            key=len,
            reverse=True,
        )
    )
    line_terminated = set(active_rules.line_terminated_delimiters)
    word_joined = set(active_rules.word_joined_delimiters)

    chars = list(text)
    length = len(text)
    index = 0
    cut_strings = 0
    state: tuple[str, str] | None = None

    while index < length:
        if state is None:
            line_marker = _match_any(text, index, line_prefixes)
            if line_marker is not None:
                _blank(chars, index, len(line_marker))
                state = ("line_comment", line_marker)
                index += len(line_marker)
                continue

            block_marker = _match_block_start(text, index, block_pairs)
            if block_marker is not None:
                start_marker, end_marker = block_marker
                _blank(chars, index, len(start_marker))
                state = ("block_comment", end_marker)
                index += len(start_marker)
                continue

            string_marker = _match_any(text, index, string_delimiters)
            if string_marker is not None and not (
                string_marker in word_joined and index > 0 and text[index - 1].isalnum()
            ):
                _blank(chars, index, len(string_marker))
                state = ("string", string_marker)
                index += len(string_marker)
                continue

            index += 1
            continue

        mode, marker = state
        if mode == "line_comment":
            if text[index] == "\n":
                state = None
            else:
                chars[index] = " "
            index += 1
            continue

        if mode == "block_comment":
            if text.startswith(marker, index):
                _blank(chars, index, len(marker))
                state = None
                index += len(marker)
            else:
                if text[index] != "\n":
                    chars[index] = " "
                index += 1
            continue

        # string
        if text[index] == "\n" and marker in line_terminated:
            cut_strings += 1
            state = None
            index += 1
            continue
        if text.startswith(marker, index) and not _is_escaped(
            text, index, marker, active_rules.escape_char
        ):
            _blank(chars, index, len(marker))
            state = None
            index += len(marker)
        else:
            if text[index] != "\n":
                chars[index] = " "
            index += 1

    open_construct = None
    if state is not None and state[0] == "block_comment":
        open_construct = "block comment"
    elif state is not None and state[0] == "string" and state[1] not in line_terminated:
        open_construct = f"{state[1]} string"
    return MaskedSource(text="".join(chars), open_construct=open_construct, cut_strings=cut_strings)


def scan_brace_balance(
    masked_text: str,
    open_char: str = "{",
    close_char: str = "}",
) -> BraceScanResult:
    """Count unmatched braces in already-masked text."""
    if len(open_char) != 1 or len(close_char) != 1:
        raise ValueError("open_char and close_char must be single characters.")

    depth = 0
    unmatched_closing = 0
    for char in masked_text:
        if char == open_char:
            depth += 1
        elif char == close_char:
            if depth == 0:
                unmatched_closing += 1
            else:
                depth -= 1
    return BraceScanResult(unmatched_closing=unmatched_closing, unclosed_opening=depth)


def line_depths(masked_text: str) -> list[int]:
    """Return the curly-brace depth in effect at the start of each line."""
    depths: list[int] = []
    depth = 0
    for line in masked_text.splitlines():
        depths.append(depth)
        for char in line:
            if char == "{":
                depth += 1
            elif char == "}":
                depth = max(0, depth - 1)
    return depths


def line_offsets(text: str) -> list[int]:
    """Return the character offset at which each line starts."""
    offsets: list[int] = []
    cursor = 0
    for line in text.splitlines(keepends=True):
        offsets.append(cursor)
        cursor += len(line)
    return offsets


def _blank(chars: list[str], index: int, count: int) -> None:
    for offset in range(count):
        chars[index + offset] = " "


def _match_any(text: str, index: int, markers: tuple[str, ...]) -> str | None:
    for marker in markers:
        if text.startswith(marker, index):
            return marker
    return None


def _match_block_start(
    text: str,
    index: int,
    pairs: tuple[tuple[str, str], ...],
) -> tuple[str, str] | None:
    for start, end in pairs:
        if text.startswith(start, index):
            return start, end
    return None


def _is_escaped(text: str, index: int, marker: str, escape_char: str) -> bool:
    if len(marker) > 1:
        return False
    backslashes = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == escape_char:
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1
