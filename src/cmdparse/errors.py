"""Custom exception hierarchy for cmdparse."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdparse.models import ParseStatus


class CmdParseError(Exception):
    """Base exception for cmdparse failures."""


class UsageError(ValueError, CmdParseError):
    """Command usage or user-input errors."""

    def __init__(self, message: str, status: "ParseStatus | None" = None) -> None:
        super().__init__(message)
        self.status = status


class UnknownCommandError(UsageError):
    """No command in the table matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


class OptionDefinitionError(ValueError, CmdParseError):
    """Option descriptor is malformed."""


class OptionTableError(ValueError, CmdParseError):
    """Option table exceeds its capacity."""
