"""Built-in slash commands for the interactive shell."""

from __future__ import annotations

from reactgen.commands.icons import Icons
from reactgen.commands.registry import CommandHandler, CommandRegistry, CommandResult
from reactgen.index import CATEGORY_TEST, FileRecord, Index, is_test_file
from reactgen.query import family_variants, is_known_template
from reactgen.session import ProjectSession

NOT_INITIALIZED = "Project not initialized. Run /init first."
RULE_WIDTH = 60


def register_builtin_commands(
    registry: CommandRegistry,
    session: ProjectSession,
    icons: Icons,
) -> None:
    """Register the shell command set."""
    registry.register(
        "init",
        _init_handler(session, icons),
        usage="/init [--force]",
        summary="Scan project and build component map",
    )
    registry.register(
        "list",
        _requires_index(session, icons, _list_handler(session, icons)),
        usage="/list [filter]",
        summary="Show available files and components",
    )
    registry.register(
        "info",
        _requires_index(session, icons, _info_handler(session, icons)),
        usage="/info <file>",
        summary="Show detailed information about a file",
    )
    registry.register(
        "test",
        _requires_index(session, icons, _test_handler(session, icons)),
        usage="/test <reference>",
        summary="Resolve a #file, .folder#file or @template reference",
    )
    registry.register(
        "help",
        _help_handler(registry),
        summary="Show this help message",
    )
    registry.register(
        "exit",
        _exit_handler(),
        summary="Exit ReactGen",
        aliases=("quit",),
    )


def _requires_index(
    session: ProjectSession,
    icons: Icons,
    handler: CommandHandler,
) -> CommandHandler:
    def guarded(arguments: list[str]) -> CommandResult:
        if session.requires_init():
            return CommandResult(
                lines=(f"{icons.warning} {NOT_INITIALIZED}",),
                ok=False,
                error_code="NOT_INITIALIZED",
            )
        return handler(arguments)

    return guarded


def _current_index(session: ProjectSession) -> Index:
    index = session.index
    if index is None:
        raise RuntimeError(NOT_INITIALIZED)
    return index


def _init_handler(session: ProjectSession, icons: Icons) -> CommandHandler:
    def handler(arguments: list[str]) -> CommandResult:
        if not session.has_package_json():
            return CommandResult(
                lines=(f"{icons.cross} No package.json found. Are you in a React project?",),
                ok=False,
                error_code="NO_PACKAGE_JSON",
            )
        force = "--force" in arguments or "-f" in arguments
        result = session.refresh(force=force)
        index = result.index

        if not result.published:
            extensions = " or ".join(session.config.scan.extensions)
            warning = [
                f"{icons.warning} No React files found in this project.",
                "",
                f"Make sure you have {extensions} files in:",
            ]
            warning.extend(f"  - {root}/" for root in session.config.scan.roots)
            return CommandResult(lines=tuple(warning), ok=False, error_code="NO_FILES")

        lines: list[str] = []
        if result.source == "cache":
            lines.append(
                f"{icons.checkmark} Using cached project map ({_format_age(result.age_seconds)})"
            )
            lines.append("  Run /init --force to rescan the project.")
        else:
            lines.append(f"{icons.checkmark} Project scan complete")
        lines.append("")
        lines.append(f"{icons.checkmark} Found {len(index.all_files)} React files")
        lines.append(f"{icons.checkmark} Found {len(index.all_exported_names)} components")
        if result.source == "scan":
            lines.append(
                f"{icons.checkmark} Project map saved to {session.map_display_path()}"
            )
        if session.project_name:
            lines.append(f"{icons.info} Project: {session.project_name}")
        return CommandResult(lines=tuple(lines))

    return handler


def _format_age(age_seconds: float | None) -> str:
    if age_seconds is None:
        return "age unknown"
    seconds = int(age_seconds)
    if seconds < 60:
        return f"scanned {seconds}s ago"
    return f"scanned {seconds // 60}m {seconds % 60}s ago"


def _list_handler(session: ProjectSession, icons: Icons) -> CommandHandler:
    def handler(arguments: list[str]) -> CommandResult:
        index = _current_index(session)
        text_filter = arguments[0] if arguments else None
        paths = list(index.all_files)
        if text_filter:
            needle = text_filter.lower()
            paths = [path for path in paths if needle in path.lower()]
        if not paths:
            return CommandResult(lines=(f'No files matching "{text_filter}"',))

        test_count = sum(1 for path in paths if index.files[path].category == CATEGORY_TEST)
        if test_count:
            summary = (
                f"{len(paths)} total, {len(paths) - test_count} components, {test_count} tests"
            )
        else:
            summary = f"{len(paths)} total"

        grouped: dict[str, list[str]] = {}
        for path in paths:
            directory, _, name = path.rpartition("/")
            grouped.setdefault(directory or ".", []).append(name)

        lines = [f"Files ({summary}):", ""]
        for directory, names in grouped.items():
            lines.append(f"{icons.folder} {directory}/")
            for name in names:
                icon = icons.test if is_test_file(name) else icons.file
                lines.append(f"  {icon} {name}")
            lines.append("")
        return CommandResult(lines=tuple(lines))

    return handler


def _info_handler(session: ProjectSession, icons: Icons) -> CommandHandler:
    def handler(arguments: list[str]) -> CommandResult:
        if not arguments:
            return CommandResult(
                lines=("Usage: /info <filename>",),
                ok=False,
                error_code="INVALID_ARGS",
            )
        record = session.engine.find_file(arguments[0])
        if record is None:
            return CommandResult(
                lines=(f"File not found: {arguments[0]}", "Try /list to see available files"),
                ok=False,
                error_code="NOT_FOUND",
            )
        return CommandResult(lines=tuple(_describe_record(record, icons)))

    return handler


def _describe_record(record: FileRecord, icons: Icons) -> list[str]:
    lines = [
        f"File: {record.relative_path}",
        icons.rule * RULE_WIDTH,
        f"Lines: {record.line_count}",
        f"Type: {record.category}",
    ]
    if record.exports:
        lines.append(f"Exports: {', '.join(record.exports)}")
    if record.imports:
        lines.append("")
        lines.append("Imports:")
        lines.extend(f"  - {specifier}" for specifier in record.imports)
    if record.reverse_usage:
        lines.append("")
        lines.append(f"Used by ({len(record.reverse_usage)}):")
        lines.extend(f"  - {user}" for user in record.reverse_usage)
    return lines


def _test_handler(session: ProjectSession, icons: Icons) -> CommandHandler:
    def handler(arguments: list[str]) -> CommandResult:
        if not arguments:
            return CommandResult(
                lines=(
                    "Usage: /test <reference>",
                    "",
                    "Examples:",
                    "  /test #Button               Test file reference",
                    "  /test .components#Header    Test folder + file reference",
                    "  /test @form:login           Test template reference",
                ),
                ok=False,
                error_code="INVALID_ARGS",
            )
        reference = arguments[0]
        if reference.startswith("@"):
            return _describe_template(reference, session, icons)

        resolved = session.engine.resolve_reference(reference)
        if resolved is None:
            return CommandResult(
                lines=(
                    f"{icons.cross} Could not resolve reference: {reference}",
                    "",
                    "Tip: Use TAB completion to explore available references.",
                ),
                ok=False,
                error_code="UNRESOLVED",
            )
        lines = [
            f"{icons.checkmark} Reference resolved successfully!",
            f"Reference: {reference}",
            f"File Path: {resolved}",
        ]
        record = _current_index(session).file(resolved)
        if record is not None:
            lines.append(f"Type: {record.category}")
            lines.append(f"Lines: {record.line_count}")
            if record.exports:
                lines.append(f"Exports: {', '.join(record.exports)}")
        return CommandResult(lines=tuple(lines))

    return handler


def _describe_template(reference: str, session: ProjectSession, icons: Icons) -> CommandResult:
    name = reference[1:]
    templates = session.engine.templates
    if is_known_template(name, templates):
        lines = [
            f"{icons.info} Template Reference: {reference}",
            "Template references are used for generating new components.",
        ]
        variants = family_variants(name, templates)
        if variants:
            lines.append("Variants: " + ", ".join(f"@{variant}" for variant in variants))
        return CommandResult(lines=tuple(lines))
    return CommandResult(
        lines=(
            f"{icons.cross} Unknown template: {reference}",
            "Tip: Type @ and press TAB to list available templates.",
        ),
        ok=False,
        error_code="UNKNOWN_TEMPLATE",
    )


def _help_handler(registry: CommandRegistry) -> CommandHandler:
    def handler(_: list[str]) -> CommandResult:
        specs = registry.specs()
        width = max(len(spec.usage) for spec in specs) + 2
        lines = ["Available Commands:", ""]
        lines.extend(f"{spec.usage.ljust(width)}{spec.summary}" for spec in specs)
        lines.append("")
        lines.append("References: #Name, .folder.path#Name, @template:variant (TAB completes)")
        lines.append("Tip: Start with /init to scan your project!")
        return CommandResult(lines=tuple(lines))

    return handler


def _exit_handler() -> CommandHandler:
    def handler(_: list[str]) -> CommandResult:
        return CommandResult(exit=True)

    return handler
