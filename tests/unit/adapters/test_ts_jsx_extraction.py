from __future__ import annotations

import pytest

from reactgen.adapters import ExtractionError, TypeScriptJsxExtractor

BUTTON_SOURCE = """import React from 'react';
import type { ButtonProps } from "./types";
import './button.css';

// export const Hidden = 1;
export interface ButtonVariants {
  primary: string;
}

export const Button = ({ label }: ButtonProps) => {
  const inner = () => {
    return label;
  };
  return <button>{inner()}</button>;
};

export default Button;
"""


def test_extracts_top_level_exports_in_source_order() -> None:
    result = TypeScriptJsxExtractor().extract(BUTTON_SOURCE, "src/components/Button.tsx")

    assert result.exports == ("ButtonVariants", "Button", "Button")
    assert result.imports == ("react", "./types", "./button.css")


def test_export_forms_are_recognized() -> None:
    source = "\n".join(
        [
            "export default function LoginForm() {",
            "  return null;",
            "}",
            "export async function loadUser() {}",
            "export function* ids() {}",
            "export class Store {}",
            "export type Size = 'sm' | 'lg';",
            "export enum Tone { Light, Dark }",
            "export let counter = 0;",
            "export { alpha, beta as gamma, type Delta };",
            "",
        ]
    )

    result = TypeScriptJsxExtractor().extract(source, "src/LoginForm.tsx")

    assert result.exports == (
        "LoginForm",
        "loadUser",
        "ids",
        "Store",
        "Size",
        "Tone",
        "counter",
        "alpha",
        "gamma",
        "Delta",
    )


def test_nested_exports_and_dynamic_imports_are_ignored() -> None:
    source = "\n".join(
        [
            "function outer() {",
            "  export const inner = 1;",
            "  import('./lazy');",
            "}",
            "const later = import('./chunk');",
            "export default function () {}",
            "",
        ]
    )

    result = TypeScriptJsxExtractor().extract(source, "src/a.jsx")

    assert result.exports == ()
    assert result.imports == ()


def test_multiline_import_reads_module_specifier() -> None:
    source = "import {\n  useState,\n  useEffect,\n} from 'react';\nexport const Hook = 1;\n"

    result = TypeScriptJsxExtractor().extract(source, "src/hooks.tsx")

    assert result.imports == ("react",)
    assert result.exports == ("Hook",)


def test_unbalanced_braces_raise_extraction_error() -> None:
    with pytest.raises(ExtractionError, match="unbalanced braces"):
        TypeScriptJsxExtractor().extract("export const Broken = () => {\n", "src/Broken.tsx")


def test_unterminated_block_comment_raises_extraction_error() -> None:
    with pytest.raises(ExtractionError, match="unterminated block comment"):
        TypeScriptJsxExtractor().extract("/* open\nexport const A = 1;\n", "src/A.tsx")


def test_apostrophe_in_jsx_text_keeps_exports_and_imports() -> None:
    source = "\n".join(
        [
            "import React from 'react';",
            "",
            "export function Notice({ count }: { count: number }) {",
            "  return (",
            "    <p>Don't miss {count > 0 && (",
            "      <span>{count}</span>",
            "    )}</p>",
            "  );",
            "}",
            "",
        ]
    )

    result = TypeScriptJsxExtractor().extract(source, "src/Notice.tsx")

    assert result.exports == ("Notice",)
    assert result.imports == ("react",)


def test_quote_cut_off_in_jsx_text_does_not_reject_file() -> None:
    source = "\n".join(
        [
            "import { Track } from './Track';",
            "",
            "export const Playlist = ({ items }) => (",
            "  <ul>Rock 'n roll {items.length > 0 && (",
            "    <li>{items[0]}</li>",
            "  )}</ul>",
            ");",
            "",
            "export const EMPTY = [];",
            "",
        ]
    )

    result = TypeScriptJsxExtractor().extract(source, "src/Playlist.jsx")

    assert result.exports == ("Playlist", "EMPTY")
    assert result.imports == ("./Track",)


def test_every_declarator_of_an_exported_binding_is_recorded() -> None:
    source = "\n".join(
        [
            "export const A = 1, B = 2;",
            "export let first,",
            "  second = { a: 1, b: 2 };",
            "export const sizes: Record<string, number> = {}, scale = (a, b) => a * b",
            "export const { hidden, other } = config;",
            "export var last",
            "",
        ]
    )

    result = TypeScriptJsxExtractor().extract(source, "src/constants.ts")

    assert result.exports == ("A", "B", "first", "second", "sizes", "scale", "last")


def test_supports_ts_and_js_family_paths() -> None:
    extractor = TypeScriptJsxExtractor()

    assert extractor.supports_path("src/App.tsx")
    assert extractor.supports_path("src/App.JSX")
    assert extractor.supports_path("src/util.ts")
    assert not extractor.supports_path("src/styles.css")
