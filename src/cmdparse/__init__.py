"""Allocation-light command and option parsing."""

from cmdparse.dispatcher import dispatch, find_command
from cmdparse.models import Command, Option, OptionKind, ParseOutcome, ParseStatus
from cmdparse.options import find_long_option, find_short_option
from cmdparse.parser import parse_options, parse_tokens

__all__ = [
    "Command",
    "Option",
    "OptionKind",
    "ParseOutcome",
    "ParseStatus",
    "dispatch",
    "find_command",
    "find_long_option",
    "find_short_option",
    "parse_options",
    "parse_tokens",
]
