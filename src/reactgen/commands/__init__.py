"""Slash commands for the interactive shell."""

from .builtin import register_builtin_commands
from .icons import ASCII_ICONS, UNICODE_ICONS, Icons, select_icons, supports_unicode
from .registry import (
    CommandDispatchError,
    CommandHandler,
    CommandRegistry,
    CommandResult,
    CommandSpec,
)

__all__ = [
    "ASCII_ICONS",
    "CommandDispatchError",
    "CommandHandler",
    "CommandRegistry",
    "CommandResult",
    "CommandSpec",
    "Icons",
    "UNICODE_ICONS",
    "register_builtin_commands",
    "select_icons",
    "supports_unicode",
]
