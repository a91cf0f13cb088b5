"""Pytest configuration and fixtures for cmdparse tests."""

import logging

import pytest

from cmdparse.models import Option, OptionKind


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo global logging changes made by cli.main()."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def sample_options():
    """Flag, string and integer options as used by the foo command."""
    return [
        Option("f", "flag", OptionKind.FLAG, help="Set a flag"),
        Option("s", "string", OptionKind.STRING, help="String value"),
        Option("n", "number", OptionKind.INTEGER, help="Integer value"),
    ]


@pytest.fixture
def named_options():
    """Options keyed by the names used in property examples."""
    return [
        Option("f", "flag", OptionKind.FLAG),
        Option("n", "name", OptionKind.STRING),
        Option("c", "count", OptionKind.INTEGER),
        Option("o", "other", OptionKind.FLAG),
    ]
