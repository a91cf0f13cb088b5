"""Typed option descriptors, parse outcomes and command entries."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from cmdparse.errors import OptionDefinitionError


class OptionKind(str, Enum):
    """How an option's value is resolved and stored."""

    FLAG = "flag"
    STRING = "string"
    INTEGER = "integer"


class ParseStatus(str, Enum):
    """Result codes of one parse call."""

    OK = "ok"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"


@dataclass
class Option:
    """One recognized option and its per-parse result fields.

    ``provided``, ``string_value`` and ``integer_value`` are overwritten by
    every parse call. Values are meaningful only while ``provided`` is true;
    a flag is fully described by ``provided``.
    """

    short_name: str | None = None
    long_name: str | None = None
    kind: OptionKind = OptionKind.FLAG
    help: str = ""
    provided: bool = field(default=False, compare=False)
    string_value: str | None = field(default=None, compare=False)
    integer_value: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.short_name is None and self.long_name is None:
            raise OptionDefinitionError("Option needs a short or a long name")
        if self.short_name is not None and len(self.short_name) != 1:
            raise OptionDefinitionError(
                f"Short option name must be a single character: {self.short_name!r}"
            )
        self.kind = OptionKind(self.kind)

    @property
    def takes_value(self) -> bool:
        return self.kind is not OptionKind.FLAG

    def reset(self) -> None:
        """Clear the result fields before a parse."""
        self.provided = False
        self.string_value = None
        self.integer_value = 0


@dataclass
class ParseOutcome:
    """Status of one parse call plus the positionals collected by it."""

    status: ParseStatus = ParseStatus.OK
    positionals: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


@dataclass(frozen=True)
class Command:
    """Associates a command name with its handler."""

    name: str
    handler: Callable[[list[str]], None]
    summary: str = ""
