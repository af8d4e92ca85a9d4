"""Tests for ``typefmt name``."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from typefmt.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


class TestNameCommand:
    def test_full_style(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "name", "datetime.timedelta", "--style", "full"])
        assert result.exit_code == 0
        assert result.output.strip() == "datetime.timedelta"

    def test_short_style(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "name", "collections.OrderedDict", "--style", "short"]
        )
        assert result.output.strip() == "OrderedDict"

    def test_builtin_repr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "name", "int", "--style", "repr"])
        assert result.output.strip() == "int"

    def test_all_styles_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["name", "datetime.timedelta"])
        assert result.exit_code == 0
        assert "OK  describe_type" in result.output
        assert "datetime.timedelta" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "name", "pathlib.Path"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["full"] == "pathlib.Path"
        assert data["data"]["short"] == "Path"

    def test_invalid_style_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["name", "int", "--style", "fancy"])
        assert result.exit_code == 2

    def test_not_found_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["name", "datetime.Nope"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "describe_type" in result.output

    def test_not_a_type_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "name", "os.path.join"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_A_TYPE"

    def test_default_style_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "typefmt.toml").write_text('[names]\ndefault_style = "short"\n')
        result = cli_runner.invoke(cli, ["-q", "name", "datetime.timedelta"])
        assert result.output.strip() == "timedelta"

    def test_default_style_from_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TYPEFMT_NAMES__DEFAULT_STYLE", "full")
        result = cli_runner.invoke(cli, ["-q", "name", "datetime.timedelta"])
        assert result.output.strip() == "datetime.timedelta"
