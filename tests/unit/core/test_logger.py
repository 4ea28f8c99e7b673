"""Unit tests for the run log.

Tests for file line format, terminal rendering, and write error handling.
"""

# pyright: reportPrivateUsage=false

import re
from collections.abc import Callable, Iterator
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dotsetup.core.logger import OUTPUT_LEVEL, LogLevel, RunLogFileHandler, SetupLogger
from rich.console import Console

LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] (\w+): (.*)$")


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / ".dotfiles_setup_20240115_103000.log"


@pytest.fixture
def run_log(log_path: Path, log_console: Console) -> Iterator[SetupLogger]:
    log = SetupLogger(log_path, console=log_console)
    yield log
    log.close()


class TestFileOutput:
    """Tests for lines written to the log file."""

    def test_creates_file(self, run_log: SetupLogger, log_path: Path) -> None:
        """The log file exists once the logger is opened."""
        assert log_path.exists()

    def test_line_format(self, run_log: SetupLogger, log_path: Path) -> None:
        """Each event is one timestamped LEVEL: message line."""
        run_log.success("Installed: htop")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        match = LINE_PATTERN.match(lines[0])
        assert match is not None
        assert match.groups() == ("SUCCESS", "Installed: htop")

    def test_all_levels(self, run_log: SetupLogger, log_path: Path) -> None:
        """The level name is written verbatim for every known level."""
        run_log.info("a")
        run_log.success("b")
        run_log.warning("c")
        run_log.error("d")

        levels = [
            LINE_PATTERN.match(line).group(1)  # type: ignore[union-attr]
            for line in log_path.read_text(encoding="utf-8").splitlines()
        ]
        assert levels == ["INFO", "SUCCESS", "WARNING", "ERROR"]

    def test_appends_to_existing_file(self, log_path: Path, log_console: Console) -> None:
        """An existing log file is appended to, never truncated."""
        log_path.write_text("earlier content\n", encoding="utf-8")

        with SetupLogger(log_path, console=log_console) as log:
            log.info("Starting package installation")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "earlier content"
        assert lines[1].endswith("INFO: Starting package installation")

    def test_message_is_not_interpolated(self, run_log: SetupLogger, log_path: Path) -> None:
        """Percent signs in messages are written as-is."""
        run_log.info("Progress 100% (%s)")

        assert log_path.read_text(encoding="utf-8").rstrip().endswith("INFO: Progress 100% (%s)")


class TestConsoleOutput:
    """Tests for the terminal rendering."""

    @pytest.mark.parametrize(
        ("level", "symbol"),
        [
            (LogLevel.SUCCESS, "✓"),
            (LogLevel.WARNING, "⚠"),
            (LogLevel.ERROR, "✗"),
            (LogLevel.INFO, "ℹ"),
        ],
    )
    def test_symbol_per_level(
        self,
        run_log: SetupLogger,
        console_text: Callable[[], str],
        level: LogLevel,
        symbol: str,
    ) -> None:
        """Known levels are printed with their symbol prefix."""
        run_log.log(level, "message text")

        assert console_text() == f"{symbol} message text\n"

    def test_level_given_as_string(
        self, run_log: SetupLogger, console_text: Callable[[], str]
    ) -> None:
        """Level names are accepted as plain strings."""
        run_log.log("WARNING", "Font cache update failed")

        assert console_text() == "⚠ Font cache update failed\n"

    def test_unknown_level_is_file_only(
        self,
        run_log: SetupLogger,
        log_path: Path,
        console_text: Callable[[], str],
    ) -> None:
        """Unknown levels are written to the file but never printed."""
        run_log.log(OUTPUT_LEVEL, "stow: conflict on .bashrc")

        assert console_text() == ""
        assert log_path.read_text(encoding="utf-8").rstrip().endswith(
            "OUTPUT: stow: conflict on .bashrc"
        )


class TestWriteErrors:
    """Tests for log file write failures."""

    def test_write_error_propagates(self, run_log: SetupLogger) -> None:
        """A failing write raises instead of being reported and ignored."""
        handler = next(h for h in run_log._logger.handlers if isinstance(h, RunLogFileHandler))
        handler.stream.close()
        handler.stream = MagicMock()
        handler.stream.write.side_effect = OSError("No space left on device")

        with pytest.raises(OSError, match="No space left"):
            run_log.info("Deploying dotfiles")

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        """Opening a log in a missing directory fails immediately."""
        with pytest.raises(OSError):
            SetupLogger(tmp_path / "missing" / "setup.log", console=Console(file=StringIO()))


class TestClose:
    """Tests for closing the log."""

    def test_close_detaches_handlers(self, log_path: Path, log_console: Console) -> None:
        """After close, no handlers remain attached."""
        log = SetupLogger(log_path, console=log_console)
        log.close()

        assert log._logger.handlers == []

    def test_separate_logs_are_isolated(self, tmp_path: Path, log_console: Console) -> None:
        """Two run logs never write into each other's file."""
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"

        with (
            SetupLogger(first, console=log_console) as a,
            SetupLogger(second, console=log_console) as b,
        ):
            a.info("one")
            b.info("two")

        assert first.read_text(encoding="utf-8").rstrip().endswith("INFO: one")
        assert second.read_text(encoding="utf-8").rstrip().endswith("INFO: two")
        assert "two" not in first.read_text(encoding="utf-8")
