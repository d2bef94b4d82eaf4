from __future__ import annotations

from pathlib import Path

from reactgen.adapters import build_extractor_registry
from reactgen.index import ScannedFile, classify_category, classify_file, is_test_file


def _scanned(relative_path: str, content: str) -> ScannedFile:
    return ScannedFile(
        relative_path=relative_path,
        absolute_path=Path("/project") / relative_path,
        content=content,
        line_count=content.count("\n") + 1,
    )


def test_test_and_spec_files_are_tests_even_with_exports() -> None:
    assert classify_category("src/Button.test.tsx", ("Button",)) == "test"
    assert classify_category("src/Button.spec.jsx", ()) == "test"
    assert is_test_file("src/__tests__/Button.test.tsx")
    assert not is_test_file("src/test/Button.tsx")
    assert not is_test_file("src/Button.testing.tsx")


def test_exports_decide_component_versus_utility() -> None:
    assert classify_category("src/Button.tsx", ("Button",)) == "component"
    assert classify_category("src/setup.tsx", ()) == "utility"


def test_classify_file_builds_record_from_extraction() -> None:
    record = classify_file(
        _scanned("src/components/Button.tsx", "import x from 'x';\nexport const Button = 1;\n"),
        build_extractor_registry(),
    )

    assert record.relative_path == "src/components/Button.tsx"
    assert record.absolute_path == str(Path("/project") / "src/components/Button.tsx")
    assert record.category == "component"
    assert record.exports == ("Button",)
    assert record.imports == ("x",)
    assert record.reverse_usage == ()
    assert record.file_name == "Button.tsx"
    assert record.stripped_name == "Button"


def test_parse_failure_degrades_to_utility() -> None:
    record = classify_file(
        _scanned("src/Broken.tsx", "export const Broken = () => {\n"),
        build_extractor_registry(),
    )

    assert record.category == "utility"
    assert record.exports == ()
    assert record.imports == ()
