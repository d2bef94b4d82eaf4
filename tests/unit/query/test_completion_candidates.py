from __future__ import annotations

from reactgen.index import FileRecord, Index, build_index
from reactgen.query import TEMPLATE_CATALOG, complete, get_files_in_folder, resolve_reference


def _record(relative_path: str, *exports: str) -> FileRecord:
    return FileRecord(
        relative_path=relative_path,
        absolute_path=f"/project/{relative_path}",
        line_count=1,
        category="component" if exports else "utility",
        exports=tuple(exports),
        imports=(),
    )


def _scenario_index() -> Index:
    return build_index(
        [
            _record("src/components/Button.tsx", "Button", "ButtonProps"),
            _record("src/components/forms/LoginForm.tsx", "LoginForm"),
        ],
        root_path="/project",
    )


def test_button_and_login_form_scenario() -> None:
    index = _scenario_index()

    assert complete(index, "#Log", 4) == ["#LoginForm"]
    assert resolve_reference(index, ".src.components#Button") == "src/components/Button.tsx"
    assert resolve_reference(index, "#NonExistent") is None
    assert ".src.components" in complete(index, ".src.", 5)
    assert get_files_in_folder(index, "src.components") == ["Button"]


def test_template_completion_is_prefix_filtered_and_sorted() -> None:
    assert complete(None, "@form:", 6) == [
        "@form:contact",
        "@form:login",
        "@form:search",
        "@form:signup",
    ]
    assert complete(None, "@button:pr", 10) == ["@button:primary"]
    assert complete(None, "@", 1) == sorted(f"@{name}" for name in TEMPLATE_CATALOG)
    assert len(TEMPLATE_CATALOG) == 16
    assert complete(None, "@Form", 5) == []


def test_file_completion_is_case_insensitive_substring_and_deduplicated() -> None:
    index = build_index(
        [
            _record("src/Button.tsx", "Button"),
            _record("app/Button.jsx", "Button"),
            _record("src/IconButton.tsx", "IconButton"),
            _record("src/Card.tsx", "Card"),
        ],
        root_path="/project",
    )

    assert complete(index, "/info #butt", 11) == ["#Button", "#IconButton"]
    assert complete(index, "#", 1) == ["#Button", "#Card", "#IconButton"]


def test_folder_completion_walks_exact_segments_and_prefix_filters_last() -> None:
    index = build_index(
        [
            _record("src/components/forms/LoginForm.tsx", "LoginForm"),
            _record("src/components/Button.tsx", "Button"),
            _record("src/config/theme.tsx"),
            _record("app/page.tsx"),
        ],
        root_path="/project",
    )

    assert complete(index, ".", 1) == [".app", ".src"]
    assert complete(index, ".src.co", 7) == [".src.components", ".src.config"]
    assert complete(index, ".src.components.", 16) == [".src.components.forms"]
    assert complete(index, ".src.Co", 7) == []
    assert complete(index, ".Src.", 5) == []
    assert complete(index, ".src..co", 8) == [".src..components", ".src..config"]
    assert complete(index, ".src.components.forms.", 22) == []


def test_results_start_with_the_typed_token() -> None:
    index = _scenario_index()

    for line in (".src.comp", "@card:"):
        candidates = complete(index, line, len(line))
        assert candidates
        assert all(candidate.startswith(line) for candidate in candidates)
    assert all(candidate.startswith("#") for candidate in complete(index, "#Bu", 3))


def test_no_index_yields_no_file_or_folder_completions() -> None:
    assert complete(None, "#Bu", 3) == []
    assert complete(None, ".src", 4) == []
    assert complete(_scenario_index(), "/list", 5) == []
