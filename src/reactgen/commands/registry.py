"""Deterministic slash-command registration primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Lines to print after a command, and whether the shell should stop."""

    lines: tuple[str, ...] = ()
    ok: bool = True
    error_code: str | None = None
    exit: bool = False


CommandHandler = Callable[[list[str]], CommandResult]


@dataclass(slots=True, frozen=True)
class CommandDispatchError(Exception):
    """Represents deterministic command dispatch failures."""

    code: str
    message: str


@dataclass(slots=True, frozen=True)
class CommandSpec:
    """Registered command with its help text."""

    name: str
    handler: CommandHandler
    usage: str
    summary: str


@dataclass(slots=True)
class CommandRegistry:
    """In-memory command registry preserving insertion order."""

    _commands: dict[str, CommandSpec] = field(default_factory=dict)
    _aliases: dict[str, str] = field(default_factory=dict)

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str = "",
        summary: str = "",
        aliases: tuple[str, ...] = (),
    ) -> None:
        """Register a named handler and optional aliases."""
        self._commands[name] = CommandSpec(
            name=name,
            handler=handler,
            usage=usage or f"/{name}",
            summary=summary,
        )
        for alias in aliases:
            self._aliases[alias] = name

    def get(self, name: str) -> CommandSpec | None:
        """Return a command by name or alias."""
        key = name.lower()
        return self._commands.get(self._aliases.get(key, key))

    def names(self) -> tuple[str, ...]:
        """Return registered command names in insertion order."""
        return tuple(self._commands.keys())

    def specs(self) -> tuple[CommandSpec, ...]:
        return tuple(self._commands.values())

    def dispatch(self, name: str, arguments: list[str]) -> CommandResult:
        """Dispatch to a registered command by name."""
        spec = self.get(name)
        if spec is None:
            raise CommandDispatchError(code="UNKNOWN_COMMAND", message=f"Unknown command: /{name}")
        return spec.handler(arguments)
