"""Tests for the root typefmt CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from typefmt import __version__
from typefmt.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "typefmt" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/typefmt-test.toml"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["name", "format", "tokens"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    assert command in cli.commands
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0


def test_invalid_toml_reports_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "typefmt.toml").write_text("[names\n")
    result = cli_runner.invoke(cli, ["tokens"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
