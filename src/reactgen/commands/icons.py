"""Terminal icons with an ASCII fallback."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Icons:
    folder: str
    file: str
    test: str
    checkmark: str
    cross: str
    arrow: str
    info: str
    warning: str
    rule: str


UNICODE_ICONS = Icons(
    folder="\U0001f4c1",
    file="\U0001f4c4",
    test="\U0001f9ea",
    checkmark="✓",
    cross="✗",
    arrow="→",
    info="ℹ",
    warning="⚠",
    rule="─",
)

ASCII_ICONS = Icons(
    folder="[DIR]",
    file="[FILE]",
    test="[TEST]",
    checkmark="[OK]",
    cross="[X]",
    arrow="->",
    info="[i]",
    warning="[!]",
    rule="-",
)


def supports_unicode(env: Mapping[str, str] | None = None, platform: str | None = None) -> bool:
    """Guess whether the terminal renders Unicode symbols."""
    environ = os.environ if env is None else env
    if environ.get("TERM") in {"linux", "dumb"}:
        return False
    if environ.get("CI") == "true" or environ.get("CONTINUOUS_INTEGRATION") == "true":
        return False
    locale = (
        environ.get("LC_ALL") or environ.get("LC_CTYPE") or environ.get("LANG") or ""
    ).lower()
    if "utf-8" in locale or "utf8" in locale:
        return True
    current_platform = sys.platform if platform is None else platform
    if not current_platform.startswith("win"):
        return True
    return bool(environ.get("WT_SESSION") or environ.get("TERM_PROGRAM"))


def select_icons(env: Mapping[str, str] | None = None, platform: str | None = None) -> Icons:
    """Return the icon set suited to the current terminal."""
    return UNICODE_ICONS if supports_unicode(env, platform) else ASCII_ICONS
