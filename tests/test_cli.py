"""Tests for the sample command-line program."""

import logging
from pathlib import Path

import pytest

import cmdparse.cli as cli_module
from cmdparse.errors import UsageError
from cmdparse.models import ParseStatus


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CMDPARSE_DEBUG", raising=False)
    monkeypatch.delenv("CMDPARSE_LOG_FILE", raising=False)


def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_module.main(["prog"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Usage: prog <command> [options]" in out
    assert "foo" in out


def test_main_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_module.main(["prog", "bar"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert out.startswith("Unknown command: bar\n")
    assert "Usage: prog <command> [options]" in out


def test_main_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_module.main(["/usr/bin/prog", "help"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Usage: prog <command> [options]" in out
    assert "  help  Show this message" in out
    assert "Options for foo:" in out
    assert "-n, --number <n>" in out


def test_main_foo_full_command_line(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_module.main(
        ["prog", "foo", "-f", "--string=hi", "-n", "-7", "pos1", "pos2"]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.splitlines() == [
        "Executing foo command",
        "Flag is set!",
        "String value: hi",
        "Number value: -7",
        "Positional arguments:",
        "\t[0] pos1",
        "\t[1] pos2",
    ]


def test_main_foo_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_module.main(["prog", "foo"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.splitlines() == [
        "Executing foo command",
        "String value: default",
    ]


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["--bogus"], "ERROR: Unknown option"),
        (["--string"], "ERROR: Missing option value"),
        (["-nabc"], "ERROR: Invalid option value"),
    ],
)
def test_main_foo_parse_errors(
    capsys: pytest.CaptureFixture[str], args: list[str], message: str
) -> None:
    exit_code = cli_module.main(["prog", "foo", *args])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert out.strip() == message


def test_cmd_foo_raises_usage_error_with_status() -> None:
    with pytest.raises(UsageError) as exc_info:
        cli_module.cmd_foo(["prog", "foo", "-z"])

    assert exc_info.value.status is ParseStatus.UNKNOWN_OPTION
    assert str(exc_info.value) == "Unknown option"


def test_foo_options_are_fresh_per_call() -> None:
    first = cli_module.foo_options()
    first[0].provided = True

    second = cli_module.foo_options()

    assert second[0].provided is False
    assert first[0] is not second[0]


def test_main_reports_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def boom(argv: list[str]) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(
        cli_module, "COMMANDS", (cli_module.Command("explode", boom),)
    )

    exit_code = cli_module.main(["prog", "explode"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "ERROR: boom" in out
    assert "Debug traceback:" not in out


def test_main_prints_traceback_in_debug_mode(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def boom(argv: list[str]) -> None:
        raise RuntimeError("boom")

    monkeypatch.setenv("CMDPARSE_DEBUG", "1")
    monkeypatch.setattr(
        cli_module, "COMMANDS", (cli_module.Command("explode", boom),)
    )

    exit_code = cli_module.main(["prog", "explode"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Debug traceback:" in captured.out
    assert "RuntimeError: boom" in captured.err


def test_main_writes_log_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    log_file = tmp_path / "logs" / "cmdparse.log"
    monkeypatch.setenv("CMDPARSE_LOG_FILE", str(log_file))

    try:
        exit_code = cli_module.main(["prog", "foo", "--bogus"])
    finally:
        for handler in list(logging.getLogger().handlers):
            logging.getLogger().removeHandler(handler)
            handler.close()

    assert exit_code == 1
    assert "Command 'foo' failed: Unknown option" in log_file.read_text(encoding="utf-8")
