"""Command lookup and dispatching by name."""

import logging
from typing import Sequence

from cmdparse.models import Command

logger = logging.getLogger(__name__)


def find_command(name: str, commands: Sequence[Command]) -> Command | None:
    """Return the first command registered under ``name``."""
    for command in commands:
        if command.name == name:
            return command
    return None


def dispatch(argv: Sequence[str], commands: Sequence[Command]) -> bool:
    """Run the command named by ``argv[1]`` with the full argument vector.

    Returns:
        True if a command was found and invoked, False otherwise.
    """
    if len(argv) < 2:
        return False

    command = find_command(argv[1], commands)
    if command is None:
        logger.info("No command registered for %r", argv[1])
        return False

    logger.debug("Dispatching %r with %d argument(s)", command.name, len(argv) - 2)
    command.handler(list(argv))
    return True
