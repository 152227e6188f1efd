"""Tests for the root typedconf CLI."""

from click.testing import CliRunner

from typedconf import __version__
from typedconf.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "typedconf" in result.output
    for command in ("check", "migrate", "defaults"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "defaults", "-H", "sample_holders:ServerSettings"])
    assert result.exit_code == 0


def test_verbose_flag_logs_debug(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["-v", "--log-json", "check", "missing.yml", "-H", "sample_holders:ServerSettings"]
    )
    assert result.exit_code == 1
    assert "falls back to its default" in result.output


def test_unknown_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["nope"])
    assert result.exit_code == 2
