"""Tests for CLI module."""

import json

import pytest
from click.testing import CliRunner

from library_catalog import __version__
from library_catalog.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def script(*lines):
    return "".join(f"{line}\n" for line in lines)


class TestMenuCommand:
    """Test running the interactive menu from the command line."""

    def test_exit_status_zero(self, runner):
        result = runner.invoke(cli, [], input=script("0"))
        assert result.exit_code == 0
        assert "Menu:" in result.output

    def test_end_of_input_exits_cleanly(self, runner):
        result = runner.invoke(cli, [], input="")
        assert result.exit_code == 0

    def test_add_and_view(self, runner):
        result = runner.invoke(
            cli, ["--no-color"], input=script("3", "1", "T1", "A1", "fiction", "2", "0")
        )
        assert result.exit_code == 0
        assert "Source added to database." in result.output
        assert "Type: Book\nTitle: T1\nAuthor: A1\nCategory: fiction\n" in result.output

    def test_nothing_kept_between_runs(self, runner):
        runner.invoke(cli, [], input=script("3", "2", "M1", "2020", "0"))
        result = runner.invoke(cli, [], input=script("2", "0"))
        assert "Database is empty." in result.output

    def test_config_file_applies(self, runner, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "display": {"separator": "#####"},
            "input": {"reprompt_on_invalid": False},
        }))

        result = runner.invoke(
            cli,
            ["--config", str(config_path)],
            input=script("3", "2", "M1", "soon", "3", "2", "M1", "2020", "2", "0"),
        )

        assert result.exit_code == 0
        assert "Please enter a whole number." in result.output
        assert "Year: 2020\n#####\n" in result.output

    def test_invalid_config_exits_with_error(self, runner, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"log_level": "LOUD"}))

        result = runner.invoke(cli, ["--config", str(config_path)], input=script("0"))

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Menu:" not in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInitConfig:
    """Test writing the default configuration."""

    def test_writes_file(self, runner, tmp_path):
        path = tmp_path / "catalog.json"
        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 0
        assert "Wrote default configuration" in result.output
        assert json.loads(path.read_text())["log_level"] == "WARNING"

    def test_does_not_start_menu(self, runner, tmp_path):
        result = runner.invoke(cli, ["init-config", str(tmp_path / "c.json")], input=script("0"))
        assert "Menu:" not in result.output
