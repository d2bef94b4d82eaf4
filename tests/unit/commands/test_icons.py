from __future__ import annotations

import pytest

from reactgen.commands import ASCII_ICONS, UNICODE_ICONS, select_icons, supports_unicode


@pytest.mark.parametrize(
    "env",
    [
        {"TERM": "dumb", "LANG": "en_US.UTF-8"},
        {"TERM": "linux"},
        {"CI": "true", "LANG": "en_US.UTF-8"},
        {"CONTINUOUS_INTEGRATION": "true"},
    ],
)
def test_limited_terminals_fall_back_to_ascii(env: dict[str, str]) -> None:
    assert not supports_unicode(env, platform="linux")
    assert select_icons(env, platform="linux") == ASCII_ICONS


def test_utf8_locale_enables_unicode_even_on_windows() -> None:
    assert supports_unicode({"LC_ALL": "C.utf8"}, platform="win32")
    assert select_icons({"LANG": "en_US.UTF-8"}, platform="win32") == UNICODE_ICONS


def test_windows_without_modern_terminal_uses_ascii() -> None:
    assert not supports_unicode({}, platform="win32")
    assert supports_unicode({"WT_SESSION": "1"}, platform="win32")
    assert supports_unicode({}, platform="darwin")


def test_ascii_icons_are_plain_ascii() -> None:
    for value in (ASCII_ICONS.folder, ASCII_ICONS.test, ASCII_ICONS.checkmark, ASCII_ICONS.rule):
        assert value.isascii()
