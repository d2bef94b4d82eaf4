"""Interactive slash-command shell."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from reactgen.commands import (
    CommandDispatchError,
    CommandRegistry,
    CommandResult,
    Icons,
    register_builtin_commands,
    select_icons,
)
from reactgen.config import AppConfig, CliOverrides, load_effective_config
from reactgen.index import ScanIOError
from reactgen.logging import AUDIT_FILENAME, AuditEvent, JsonlAuditLogger
from reactgen.query import ReferenceEngine
from reactgen.session import ProjectSession

PROMPT = "reactgen> "

logger = logging.getLogger(__name__)

_ARGUMENT_KEYS = {"list": "filter", "info": "file", "test": "reference"}


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for shell startup configuration."""
    parser = argparse.ArgumentParser(prog="reactgen")
    parser.add_argument("--project-root", required=False, default=".")
    parser.add_argument("--data-dir", required=False, default=None)
    parser.add_argument("--staleness-seconds", type=int, required=False, default=None)
    parser.add_argument("--max-workers", type=int, required=False, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser


class ReplShell:
    """Line-oriented shell routing slash commands to the registry."""

    def __init__(self, config: AppConfig, icons: Icons | None = None) -> None:
        self._config = config
        self._icons = icons or select_icons()
        self._session = ProjectSession(config)
        self._audit_logger = JsonlAuditLogger(path=config.data_dir / AUDIT_FILENAME)
        self._registry = CommandRegistry()
        register_builtin_commands(self._registry, self._session, self._icons)

    @property
    def session(self) -> ProjectSession:
        return self._session

    @property
    def engine(self) -> ReferenceEngine:
        return self._session.engine

    @property
    def audit_logger(self) -> JsonlAuditLogger:
        return self._audit_logger

    def serve(self, in_stream: TextIO, out_stream: TextIO) -> None:
        """Run commands read line by line until /exit or end of input."""
        for raw_line in in_stream:
            result = self.handle_line(raw_line)
            self._write(out_stream, result)
            if result.exit:
                break
        out_stream.write("Goodbye!\n")
        out_stream.flush()

    def serve_interactive(
        self,
        out_stream: TextIO,
        read_line: Callable[[str], str] = input,
    ) -> None:
        """Prompt for commands until /exit or end of input."""
        out_stream.write("Ready.\n\n")
        while True:
            try:
                raw_line = read_line(PROMPT)
            except EOFError:
                break
            except KeyboardInterrupt:
                out_stream.write("\n\nUse /exit to quit\n")
                continue
            result = self.handle_line(raw_line)
            self._write(out_stream, result)
            if result.exit:
                break
        out_stream.write("\nGoodbye!\n")
        out_stream.flush()

    def handle_line(self, raw_line: str) -> CommandResult:
        """Execute one input line and return what to print."""
        line = raw_line.strip()
        if not line:
            return CommandResult()
        if not line.startswith("/"):
            result = CommandResult(
                lines=("Commands must start with /", "Type /help for available commands"),
                ok=False,
                error_code="NOT_A_COMMAND",
            )
            self.log_command("invalid_input", {"input": line}, result)
            return result

        parts = line[1:].split()
        name = parts[0].lower() if parts else ""
        arguments = parts[1:]
        try:
            result = self._registry.dispatch(name, arguments)
        except CommandDispatchError as error:
            result = CommandResult(
                lines=(error.message, "Type /help for available commands"),
                ok=False,
                error_code=error.code,
            )
        except ScanIOError as error:
            logger.debug("Scan failed", exc_info=True)
            result = CommandResult(
                lines=(f"{self._icons.cross} Failed to scan project: {error}",),
                ok=False,
                error_code="SCAN_FAILED",
            )
        self.log_command(name, _argument_metadata(name, arguments), result)
        return result

    def log_command(
        self,
        command: str,
        arguments: dict[str, object],
        result: CommandResult,
    ) -> None:
        """Log one sanitized command event."""
        self._audit_logger.append(
            AuditEvent.for_command(command, arguments, ok=result.ok, error_code=result.error_code)
        )

    @staticmethod
    def _write(out_stream: TextIO, result: CommandResult) -> None:
        for text in result.lines:
            out_stream.write(f"{text}\n")
        if result.lines:
            out_stream.write("\n")
        out_stream.flush()


def _argument_metadata(command: str, arguments: list[str]) -> dict[str, object]:
    if command == "init":
        return {"force": "--force" in arguments or "-f" in arguments}
    key = _ARGUMENT_KEYS.get(command)
    if key is not None and arguments:
        return {key: arguments[0]}
    if arguments:
        return {"arguments": arguments}
    return {}


def readline_candidates(engine: ReferenceEngine, line: str, begin: int, end: int) -> list[str]:
    """Return replacements for line[begin:end] that complete only the reference token."""
    token = engine.recognize(line, end)
    if token is None or token.start < begin:
        return []
    head = line[begin : token.start]
    return [head + candidate for candidate in engine.complete(line, end)]


def install_readline_completer(engine: ReferenceEngine) -> bool:
    """Bind TAB completion to the engine; returns False where readline is unavailable."""
    try:
        import readline
    except ImportError:
        return False

    matches: list[str] = []

    def completer(_: str, state: int) -> str | None:
        if state == 0:
            matches[:] = readline_candidates(
                engine,
                readline.get_line_buffer(),
                readline.get_begidx(),
                readline.get_endidx(),
            )
        return matches[state] if state < len(matches) else None

    readline.set_completer_delims(" \t\n")
    readline.set_completer(completer)
    readline.parse_and_bind("tab: complete")
    return True


def create_shell(
    project_root: str,
    cli_overrides: CliOverrides | None = None,
    icons: Icons | None = None,
) -> ReplShell:
    """Create a configured shell instance."""
    config = load_effective_config(Path(project_root).resolve(), cli_overrides)
    return ReplShell(config=config, icons=icons)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the reactgen shell."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    overrides = CliOverrides(
        data_dir=Path(args.data_dir).resolve() if args.data_dir is not None else None,
        staleness_seconds=args.staleness_seconds,
        max_workers=args.max_workers,
    )
    try:
        shell = create_shell(project_root=args.project_root, cli_overrides=overrides)
    except ValueError as error:
        parser.error(str(error))
    if sys.stdin.isatty():
        install_readline_completer(shell.engine)
        shell.serve_interactive(out_stream=sys.stdout)
    else:
        shell.serve(in_stream=sys.stdin, out_stream=sys.stdout)
    return 0
