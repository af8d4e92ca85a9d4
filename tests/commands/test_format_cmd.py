"""Tests for ``typefmt format`` and ``typefmt tokens``."""

import json

import pytest
from click.testing import CliRunner

from typefmt.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


class TestFormatCommand:
    def test_value_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "expected str, got %T", "42"])
        assert result.exit_code == 0
        assert result.output.strip() == "expected str, got int"

    def test_type_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["format", "%N is not %#N", "datetime.timedelta", "collections.OrderedDict"]
        )
        assert result.output.strip() == "datetime.timedelta is not OrderedDict"

    def test_list_literal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "%T", "[1, 2]"])
        assert result.output.strip() == "list"

    def test_padding(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "%-6s|%3d|", "'ab'", "7"])
        assert result.output.rstrip("\n") == "ab    |  7|"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "%#T", "3.5"])
        data = json.loads(result.output)
        assert data["data"]["message"] == "float"
        assert data["meta"]["directives"] == ["%#T"]

    def test_bad_directive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "%q"])
        assert result.exit_code == 1
        assert "unsupported format character" in result.output

    def test_oversized_precision(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "%.99999999999d", "1"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "FORMAT_ERROR"

    def test_missing_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "%T and %T", "1"])
        assert result.exit_code == 1
        assert "not enough arguments" in result.output

    def test_n_with_non_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "%N", "os.sep"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_A_TYPE"


class TestTokensCommand:
    def test_lists_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tokens"])
        assert result.exit_code == 0
        for token in ("%T", "%#T", "%N", "%#N"):
            assert token in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "tokens"])
        assert result.output.split() == ["%T", "%#T", "%N", "%#N"]


class TestExamples:
    @pytest.mark.parametrize("command", ["name", "format"])
    def test_examples_flag(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--examples"])
        assert result.exit_code == 0
        assert f"typefmt {command}" in result.output
