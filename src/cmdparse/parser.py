"""Single-pass classification of argument tokens into options and positionals."""

from typing import Sequence

from cmdparse.constants import MAX_POSITIONALS
from cmdparse.models import Option, OptionKind, ParseOutcome, ParseStatus
from cmdparse.options import find_long_option, find_short_option, is_valid_int

# Program name and command name precede the tokens handed to the parser.
_SKIPPED_TOKENS = 2


def parse_options(
    argv: Sequence[str],
    options: Sequence[Option],
    max_positionals: int = MAX_POSITIONALS,
) -> ParseOutcome:
    """Parse a full process argument vector, skipping program and command name.

    Args:
        argv: Argument vector as received by the program (``sys.argv``).
        options: Caller-owned option table, updated in place.
        max_positionals: Capacity of the returned positional list.

    Returns:
        ParseOutcome with the status and collected positionals.
    """
    return parse_tokens(argv[_SKIPPED_TOKENS:], options, max_positionals)


def parse_tokens(
    tokens: Sequence[str],
    options: Sequence[Option],
    max_positionals: int = MAX_POSITIONALS,
) -> ParseOutcome:
    """Parse option and positional tokens against ``options``.

    Every option is reset first. Parsing stops at the first malformed token
    and reports it through ``ParseOutcome.status``; options matched by
    earlier tokens keep their values. Positionals beyond ``max_positionals``
    are dropped.

    Examples:
        ["-f", "--string=hi", "-n", "-7", "a"] → flag provided, "hi", -7, ["a"]
        ["--string"] → MISSING_VALUE
        ["--number=abc"] → INVALID_VALUE
    """
    outcome = ParseOutcome()

    for option in options:
        option.reset()

    i = 0
    while i < len(tokens):
        token = tokens[i]
        value: str | None = None

        if token.startswith("--"):
            name, sep, inline = token[2:].partition("=")
            option = find_long_option(name, options)
            if option is None:
                outcome.status = ParseStatus.UNKNOWN_OPTION
                return outcome

            if sep:
                value = inline
            elif option.takes_value:
                if not _can_consume(tokens, i + 1, option):
                    outcome.status = ParseStatus.MISSING_VALUE
                    return outcome
                i += 1
                value = tokens[i]

        elif token.startswith("-") and len(token) > 1:
            option = find_short_option(token[1], options)
            if option is None:
                outcome.status = ParseStatus.UNKNOWN_OPTION
                return outcome

            # Characters after a flag's key are ignored; flags never cluster.
            if option.takes_value:
                if len(token) > 2:
                    value = token[2:]
                elif _can_consume(tokens, i + 1, option):
                    i += 1
                    value = tokens[i]
                else:
                    outcome.status = ParseStatus.MISSING_VALUE
                    return outcome

        else:
            if len(outcome.positionals) < max_positionals:
                outcome.positionals.append(token)
            i += 1
            continue

        status = _store_value(option, value)
        if status is not ParseStatus.OK:
            outcome.status = status
            return outcome
        i += 1

    return outcome


def _can_consume(tokens: Sequence[str], index: int, option: Option) -> bool:
    """Check whether ``tokens[index]`` may serve as the value of ``option``."""
    if index >= len(tokens):
        return False
    candidate = tokens[index]
    if not candidate.startswith("-"):
        return True
    # Negative numbers are values, not options, for integer options.
    return option.kind is OptionKind.INTEGER and is_valid_int(candidate)


def _store_value(option: Option, value: str | None) -> ParseStatus:
    option.provided = True

    if option.kind is OptionKind.STRING:
        option.string_value = value
    elif option.kind is OptionKind.INTEGER:
        if not is_valid_int(value):
            return ParseStatus.INVALID_VALUE
        option.integer_value = int(value, 10)

    return ParseStatus.OK
