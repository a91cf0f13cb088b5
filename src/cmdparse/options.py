"""Option table lookups and value validation."""

import re
from typing import Sequence

from cmdparse.constants import MAX_OPTIONS
from cmdparse.errors import OptionTableError
from cmdparse.models import Option

_INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+")


def find_short_option(key: str, options: Sequence[Option]) -> Option | None:
    """Return the first option whose short name is ``key``."""
    for option in options:
        if option.short_name is not None and option.short_name == key:
            return option
    return None


def find_long_option(name: str, options: Sequence[Option]) -> Option | None:
    """Return the first option whose long name is ``name``."""
    for option in options:
        if option.long_name is not None and option.long_name == name:
            return option
    return None


def is_valid_int(text: str | None) -> bool:
    """Check ``text`` is an optional sign followed by ASCII digits."""
    if not text:
        return False
    return _INT_LITERAL_RE.fullmatch(text) is not None


def check_option_table(options: Sequence[Option], max_options: int = MAX_OPTIONS) -> None:
    """Raise if the table holds more options than its capacity."""
    if len(options) > max_options:
        raise OptionTableError(
            f"Option table holds {len(options)} options, capacity is {max_options}"
        )
