"""Tests for CLI commands."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest  # type: ignore[import-not-found]
from click.testing import CliRunner  # type: ignore[import-not-found]

from minute_share import __version__
from minute_share.cli.config_commands import convert_value
from minute_share.cli.main import cli
from minute_share.core.config import ConfigManager
from minute_share.core.log import setup_logging


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


class TestCLICommands:
    """Test top-level CLI commands."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version flag."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, runner: CliRunner) -> None:
        """Test --help flag."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Minute Share" in result.output
        assert "serve" in result.output

    def test_serve_uses_config(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test that serve passes host and port from config."""
        ConfigManager(temp_config_path).set("api.port", 9123)

        with patch("minute_share.cli.main.run_server") as run_server:
            result = runner.invoke(cli, ["--config", str(temp_config_path), "serve"])

        assert result.exit_code == 0
        kwargs = run_server.call_args.kwargs
        assert kwargs["port"] == 9123
        assert kwargs["host"] == "localhost"
        assert kwargs["reload"] is False

    def test_serve_options_override_config(
        self, runner: CliRunner, temp_config_path: Path
    ) -> None:
        """Test --host and --port."""
        with patch("minute_share.cli.main.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["--config", str(temp_config_path), "serve", "--host", "0.0.0.0", "--port", "8081"],
            )

        assert result.exit_code == 0
        kwargs = run_server.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8081

    def test_serve_reports_startup_failure(
        self, runner: CliRunner, temp_config_path: Path
    ) -> None:
        """Test that server errors exit with status 1."""
        with patch("minute_share.cli.main.run_server", side_effect=OSError("port in use")):
            result = runner.invoke(cli, ["--config", str(temp_config_path), "serve"])

        assert result.exit_code == 1


class TestConfigCommands:
    """Test config subcommands."""

    def test_config_show_json(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test showing configuration as JSON."""
        result = runner.invoke(cli, ["--config", str(temp_config_path), "config", "show", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["settings"]["default_base_amount"] == 10000

    def test_config_show_table(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test showing configuration as a table."""
        result = runner.invoke(cli, ["--config", str(temp_config_path), "config", "show"])

        assert result.exit_code == 0
        assert "Config file:" in result.output

    def test_config_get(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test reading a single value."""
        result = runner.invoke(cli, ["--config", str(temp_config_path), "config", "get", "api.port"])

        assert result.exit_code == 0
        assert result.output.strip() == "8000"

    def test_config_get_missing_key(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test reading an unknown key."""
        result = runner.invoke(
            cli, ["--config", str(temp_config_path), "config", "get", "no.such.key"]
        )
        assert result.exit_code == 1

    def test_config_set(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test setting a value."""
        result = runner.invoke(
            cli,
            ["--config", str(temp_config_path), "config", "set", "settings.default_base_amount", "15000"],
        )

        assert result.exit_code == 0
        assert ConfigManager(temp_config_path).get("settings.default_base_amount") == 15000

    def test_config_set_invalid(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test that invalid values are rejected."""
        result = runner.invoke(
            cli, ["--config", str(temp_config_path), "config", "set", "api.port", "99999"]
        )

        assert result.exit_code == 1
        assert ConfigManager(temp_config_path).get("api.port") == 8000

    def test_config_reset(self, runner: CliRunner, temp_config_path: Path) -> None:
        """Test resetting configuration."""
        ConfigManager(temp_config_path).set("api.port", 9000)

        result = runner.invoke(cli, ["--config", str(temp_config_path), "config", "reset", "--yes"])

        assert result.exit_code == 0
        assert ConfigManager(temp_config_path).get("api.port") == 8000


class TestConvertValue:
    """Test command-line value conversion."""

    def test_booleans(self) -> None:
        """Test boolean words."""
        assert convert_value("true") is True
        assert convert_value("No") is False

    def test_numbers(self) -> None:
        """Test integers and floats."""
        assert convert_value("42") == 42
        assert convert_value("2.5") == 2.5

    def test_null_and_strings(self) -> None:
        """Test null and plain strings."""
        assert convert_value("null") is None
        assert convert_value("DEBUG") == "DEBUG"


class TestLoggingSetup:
    """Test logging configuration."""

    def test_setup_logging_sets_level(self, temp_config_path: Path) -> None:
        """Test that the configured level is applied once."""
        config = ConfigManager(temp_config_path)
        config.set("logging.level", "DEBUG")
        root_logger = logging.getLogger()
        previous_level = root_logger.level

        try:
            setup_logging(config)
            setup_logging(config)

            assert root_logger.level == logging.DEBUG
            names = [h.get_name() for h in root_logger.handlers]
            assert names.count("minute-share-console") == 1
        finally:
            for handler in list(root_logger.handlers):
                if handler.get_name() == "minute-share-console":
                    root_logger.removeHandler(handler)
            root_logger.setLevel(previous_level)
