"""Unit tests for the main CLI application."""

import logging
from unittest.mock import MagicMock, patch

from dotsetup import __version__
from dotsetup.cli.main import app, configure_debug_logging
from rich.logging import RichHandler
from typer.testing import CliRunner

runner = CliRunner()


class TestMainCallback:
    """Tests for the top-level command."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"dotsetup version {__version__}" in result.output

    @patch("dotsetup.cli.commands.run.execute_setup")
    def test_bare_invocation_runs_setup(self, mock_execute: MagicMock) -> None:
        """dotsetup without a subcommand runs the complete setup."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        mock_execute.assert_called_once_with()

    @patch("dotsetup.cli.commands.run.execute_setup")
    def test_subcommand_does_not_run_setup_twice(self, mock_execute: MagicMock) -> None:
        """A subcommand runs only its own logic."""
        runner.invoke(app, ["run"])

        mock_execute.assert_called_once()

    @patch("dotsetup.cli.commands.check.find_missing_tools", return_value=[])
    @patch("dotsetup.cli.commands.run.execute_setup")
    def test_check_does_not_run_setup(
        self, mock_execute: MagicMock, mock_missing: MagicMock
    ) -> None:
        """dotsetup check never starts a setup run."""
        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        mock_execute.assert_not_called()

    def test_help(self) -> None:
        """-h lists the subcommands."""
        result = runner.invoke(app, ["-h"])

        assert result.exit_code == 0
        for name in ("run", "check", "config"):
            assert name in result.output


class TestDebugLogging:
    """Tests for --verbose logging setup."""

    def test_adds_single_handler(self) -> None:
        """Repeated calls attach only one Rich handler."""
        package_logger = logging.getLogger("dotsetup")
        original_level = package_logger.level
        try:
            configure_debug_logging()
            configure_debug_logging()

            handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
            assert len(handlers) == 1
            assert package_logger.level == logging.DEBUG
        finally:
            for handler in package_logger.handlers[:]:
                package_logger.removeHandler(handler)
            package_logger.setLevel(original_level)
