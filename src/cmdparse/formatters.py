"""User-facing text rendering."""

from typing import Sequence

from cmdparse.models import Command, Option, OptionKind, ParseStatus

_STATUS_DESCRIPTIONS = {
    ParseStatus.OK: "OK",
    ParseStatus.UNKNOWN_OPTION: "Unknown option",
    ParseStatus.MISSING_VALUE: "Missing option value",
    ParseStatus.INVALID_VALUE: "Invalid option value",
}
_VALUE_PLACEHOLDERS = {
    OptionKind.FLAG: "",
    OptionKind.STRING: " <value>",
    OptionKind.INTEGER: " <n>",
}


def describe_parse_status(status: ParseStatus) -> str:
    """Return the message shown for a parse status."""
    return _STATUS_DESCRIPTIONS[status]


def _option_usage(option: Option) -> str:
    names = []
    if option.short_name is not None:
        names.append(f"-{option.short_name}")
    if option.long_name is not None:
        names.append(f"--{option.long_name}")
    return ", ".join(names) + _VALUE_PLACEHOLDERS[option.kind]


def format_option_help(options: Sequence[Option]) -> str:
    """Render one aligned help line per option."""
    if not options:
        return ""

    rows = [(_option_usage(option), option.help) for option in options]
    width = max(len(usage) for usage, _ in rows)

    lines = []
    for usage, help_text in rows:
        if help_text:
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        else:
            lines.append(f"  {usage}")
    return "\n".join(lines)


def render_help_text(commands: Sequence[Command], program: str) -> str:
    """Render usage and the command list."""
    lines = [f"Usage: {program} <command> [options]", "", "Commands:"]
    if commands:
        width = max(len(command.name) for command in commands)
        for command in commands:
            lines.append(f"  {command.name.ljust(width)}  {command.summary}".rstrip())
    return "\n".join(lines)
