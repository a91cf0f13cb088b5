"""Sample command-line program built on the option parser."""

import logging
import os
import sys
import traceback
from pathlib import Path

from cmdparse.constants import APP_NAME, DEBUG_ENV_VAR, ERROR_PREFIX, LOG_FILE_ENV_VAR
from cmdparse.dispatcher import dispatch
from cmdparse.errors import CmdParseError, UnknownCommandError, UsageError
from cmdparse.formatters import describe_parse_status, format_option_help, render_help_text
from cmdparse.logging_utils import setup_logging
from cmdparse.models import Command, Option, OptionKind
from cmdparse.options import check_option_table
from cmdparse.parser import parse_options

logger = logging.getLogger(__name__)

DEFAULT_STRING_VALUE = "default"


def foo_options() -> list[Option]:
    """Build a fresh option table for the foo command."""
    return [
        Option("f", "flag", OptionKind.FLAG, help="Set a flag"),
        Option("s", "string", OptionKind.STRING, help="String value"),
        Option("n", "number", OptionKind.INTEGER, help="Integer value"),
    ]


def _program_name(argv: list[str]) -> str:
    if argv and argv[0]:
        return Path(argv[0]).name
    return APP_NAME


def cmd_foo(argv: list[str]) -> None:
    """Example command with a flag, a string, an integer and positionals."""
    opts = foo_options()
    check_option_table(opts)
    flag, string, number = opts

    out = parse_options(argv, opts)
    if not out.ok:
        raise UsageError(describe_parse_status(out.status), status=out.status)

    print("Executing foo command")

    if flag.provided:
        print("Flag is set!")

    str_val = string.string_value if string.string_value is not None else DEFAULT_STRING_VALUE
    print(f"String value: {str_val}")

    if number.provided:
        print(f"Number value: {number.integer_value}")

    if out.positionals:
        print("Positional arguments:")
        for i, positional in enumerate(out.positionals):
            print(f"\t[{i}] {positional}")


def cmd_help(argv: list[str]) -> None:
    """Show usage, commands and the foo options."""
    print(render_help_text(COMMANDS, _program_name(argv)))
    print()
    print("Options for foo:")
    print(format_option_help(foo_options()))


COMMANDS = (
    Command("foo", cmd_foo, summary="Example command with various options and positionals"),
    Command("help", cmd_help, summary="Show this message"),
)


def _report_unexpected_error(error: Exception) -> None:
    """Print an unexpected exception with optional debug traceback."""
    print(f"{ERROR_PREFIX} {error}")
    if os.getenv(DEBUG_ENV_VAR):
        print("Debug traceback:")
        traceback.print_exc()


def main(argv: list[str] | None = None) -> int:
    """Run the command named on the command line and return the exit status."""
    args = list(sys.argv if argv is None else argv)
    setup_logging(os.getenv(LOG_FILE_ENV_VAR), debug=bool(os.getenv(DEBUG_ENV_VAR)))

    if len(args) < 2:
        cmd_help(args)
        return 1

    try:
        if not dispatch(args, COMMANDS):
            raise UnknownCommandError(args[1])
    except UnknownCommandError as e:
        print(e)
        cmd_help(args)
        return 1
    except CmdParseError as e:
        logger.info("Command %r failed: %s", args[1], e)
        print(f"{ERROR_PREFIX} {e}")
        return 1
    except Exception as e:
        logger.exception("Unexpected failure in command %r", args[1])
        _report_unexpected_error(e)
        return 1

    return 0
