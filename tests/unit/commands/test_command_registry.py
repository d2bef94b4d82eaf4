from __future__ import annotations

import pytest

from reactgen.commands import CommandDispatchError, CommandRegistry, CommandResult


def test_registry_keeps_deterministic_registration_order() -> None:
    registry = CommandRegistry()
    registry.register("alpha", lambda _: CommandResult(lines=("alpha",)))
    registry.register("beta", lambda _: CommandResult(lines=("beta",)))

    assert registry.names() == ("alpha", "beta")
    assert [spec.usage for spec in registry.specs()] == ["/alpha", "/beta"]


def test_registry_dispatches_by_name_and_alias_case_insensitively() -> None:
    registry = CommandRegistry()
    registry.register(
        "echo",
        lambda arguments: CommandResult(lines=tuple(arguments)),
        aliases=("say",),
    )

    assert registry.dispatch("echo", ["a", "b"]).lines == ("a", "b")
    assert registry.dispatch("SAY", ["c"]).lines == ("c",)


def test_unknown_command_raises_dispatch_error() -> None:
    registry = CommandRegistry()

    with pytest.raises(CommandDispatchError) as excinfo:
        registry.dispatch("missing", [])

    assert excinfo.value.code == "UNKNOWN_COMMAND"
    assert excinfo.value.message == "Unknown command: /missing"
