"""Lexical TypeScript/JSX extractor with deterministic export and import discovery."""

from __future__ import annotations

import re

from reactgen.adapters.base import ExtractionError, ExtractionResult
from reactgen.adapters.lexical import (
    LexicalRules,
    line_depths,
    line_offsets,
    mask_source,
    scan_brace_balance,
)

_IDENT = r"[A-Za-z_$][A-Za-z0-9_$]*"

_EXPORT_START_RE = re.compile(r"[ \t]*export\b")
_EXPORT_DECLARATION_RE = re.compile(
    r"[ \t]*export\s+(?:declare\s+)?(?:default\s+)?(?:abstract\s+)?(?:const\s+)?"
    rf"(?:class|interface|type|enum)\s+({_IDENT})"
)
_EXPORT_FUNCTION_RE = re.compile(
    r"[ \t]*export\s+(?:declare\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*"
    rf"({_IDENT})"
)
_EXPORT_BINDING_RE = re.compile(r"[ \t]*export\s+(?:declare\s+)?(?:const|let|var)\s+")
_DECLARATOR_RE = re.compile(rf"\s*({_IDENT})\s*(?:[:=!]|\Z)")
_EXPORT_DEFAULT_IDENTIFIER_RE = re.compile(
    rf"[ \t]*export\s+default\s+({_IDENT})[ \t\r]*(?:;|$)",
    re.MULTILINE,
)
_EXPORT_LIST_RE = re.compile(r"[ \t]*export\s+(?:type\s+)?\{([^}]*)\}")
_SPECIFIER_RE = re.compile(
    rf"^(?:type\s+)?({_IDENT})(?:\s+as\s+({_IDENT}))?$"
)
_IMPORT_START_RE = re.compile(r"[ \t]*import\b(?!\s*[(.])")
_STRING_LITERAL_RE = re.compile(r"""(['"])((?:\\.|(?!\1)[^\\\n])*)\1""")
_RESERVED_DEFAULTS = {"class", "function", "async", "abstract", "interface", "enum"}

_TS_RULES = LexicalRules(
    line_comment_prefixes=("//",),
    block_comment_pairs=(("/*", "*/"),),
    string_delimiters=("'", '"', "`"),
    line_terminated_delimiters=("'", '"'),
    word_joined_delimiters=("'",),
)
_CONTINUATION_CHARS = ",=>?:|&+-*/"
_OPENERS = "([{"
_CLOSERS = ")]}"


class TypeScriptJsxExtractor:
    """Deterministic lexical extractor for TypeScript and JavaScript component files."""

    name = "ts_jsx_lexical"
    _extensions = (".tsx", ".jsx", ".ts", ".js", ".mts", ".cts", ".mjs", ".cjs")

    def supports_path(self, path: str) -> bool:
        """Return True when path is a TypeScript or JavaScript source file."""
        return path.lower().endswith(self._extensions)

    def extract(self, content: str, path: str) -> ExtractionResult:
        """Extract top-level export names and import specifiers in source order.

        Raises ExtractionError for an unterminated comment or template literal, and for
        unbalanced braces unless a quote cut off at a line end explains the imbalance.
        """
        source = mask_source(content, _TS_RULES)
        if source.open_construct is not None:
            raise ExtractionError(f"{path}: unterminated {source.open_construct}")
        masked = source.text
        balance = scan_brace_balance(masked)
        if not balance.balanced and source.cut_strings == 0:
            raise ExtractionError(
                f"{path}: unbalanced braces "
                f"(unmatched_closing={balance.unmatched_closing}, "
                f"unclosed_opening={balance.unclosed_opening})"
            )

        exports: list[str] = []
        imports: list[str] = []
        depths = line_depths(masked)
        for index, offset in enumerate(line_offsets(masked)):
            if depths[index] != 0:
                continue
            if _EXPORT_START_RE.match(masked, offset) is not None:
                exports.extend(_export_names(masked, offset))
                continue
            import_match = _IMPORT_START_RE.match(masked, offset)
            if import_match is not None:
                specifier = _import_specifier(content, masked, import_match.end())
                if specifier is not None:
                    imports.append(specifier)
        return ExtractionResult(exports=tuple(exports), imports=tuple(imports))


def _export_names(masked: str, offset: int) -> list[str]:
    declaration = _EXPORT_DECLARATION_RE.match(masked, offset)
    if declaration is not None:
        return [declaration.group(1)]
    function = _EXPORT_FUNCTION_RE.match(masked, offset)
    if function is not None:
        return [function.group(1)]
    binding = _EXPORT_BINDING_RE.match(masked, offset)
    if binding is not None:
        return _declarator_names(masked, binding.end())
    default = _EXPORT_DEFAULT_IDENTIFIER_RE.match(masked, offset)
    if default is not None:
        name = default.group(1)
        if name in _RESERVED_DEFAULTS:
            return []
        return [name]
    listing = _EXPORT_LIST_RE.match(masked, offset)
    if listing is not None:
        return _specifier_names(listing.group(1))
    return []


def _declarator_names(masked: str, start: int) -> list[str]:
    """Return identifier names bound by one const/let/var statement.

    Destructuring patterns and pieces split out of generic type arguments are skipped.
    """
    names: list[str] = []
    for piece in _declarator_pieces(masked, start):
        match = _DECLARATOR_RE.match(piece)
        if match is not None:
            names.append(match.group(1))
    return names


def _declarator_pieces(masked: str, start: int) -> list[str]:
    pieces: list[str] = []
    nesting = 0
    piece_start = start
    cursor = start
    length = len(masked)
    while cursor < length:
        char = masked[cursor]
        if char in _OPENERS:
            nesting += 1
        elif char in _CLOSERS:
            nesting -= 1
            if nesting < 0:
                break
        elif nesting == 0 and char == ";":
            break
        elif nesting == 0 and char == ",":
            pieces.append(masked[piece_start:cursor])
            piece_start = cursor + 1
        elif nesting == 0 and char == "\n" and _statement_ends(masked, piece_start, cursor):
            break
        cursor += 1
    pieces.append(masked[piece_start:cursor])
    return pieces


def _statement_ends(masked: str, piece_start: int, newline: int) -> bool:
    before = masked[piece_start:newline].rstrip()
    if not before or before[-1] in _CONTINUATION_CHARS:
        return False
    after = masked[newline:].lstrip()
    return not after or after[0] not in ",.?:"


def _specifier_names(body: str) -> list[str]:
    names: list[str] = []
    for raw in body.split(","):
        specifier = " ".join(raw.split())
        if not specifier:
            continue
        match = _SPECIFIER_RE.match(specifier)
        if match is None:
            continue
        names.append(match.group(2) or match.group(1))
    return names


def _import_specifier(original: str, masked: str, start: int) -> str | None:
    """Read the first string literal after an import keyword, within one statement."""
    cursor = start
    length = len(masked)
    while cursor < length:
        char = masked[cursor]
        if char in ";=(":
            return None
        if char == " " and original[cursor] in "'\"":
            literal = _STRING_LITERAL_RE.match(original, cursor)
            if literal is None:
                return None
            return literal.group(2)
        cursor += 1
    return None
