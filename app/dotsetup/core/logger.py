"""Run log for a setup session.

Every event of a run is appended to a per-run log file as
``[YYYY-MM-DD HH:MM:SS] LEVEL: message`` and mirrored to the terminal
as a colored, symbol-prefixed line. Only the four known levels reach
the terminal; anything else is written to the file only.

The log file is also the sink for raw output of external commands,
which open it in append mode while the handler keeps it open.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from types import TracebackType

from rich.console import Console
from rich.text import Text

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Level name for captured tool output; written to the file only
OUTPUT_LEVEL = "OUTPUT"


class LogLevel(str, Enum):
    """Levels recognized by the run log."""

    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"


_LEVEL_NUMBERS: dict[str, int] = {
    LogLevel.INFO.value: logging.INFO,
    LogLevel.SUCCESS.value: SUCCESS_LEVEL_NUM,
    LogLevel.WARNING.value: logging.WARNING,
    LogLevel.ERROR.value: logging.ERROR,
}

# Terminal symbol and theme style per level
_CONSOLE_MARKERS: dict[str, tuple[str, str]] = {
    LogLevel.SUCCESS.value: ("✓", "success"),
    LogLevel.WARNING.value: ("⚠", "warning"),
    LogLevel.ERROR.value: ("✗", "error"),
    LogLevel.INFO.value: ("ℹ", "info"),
}


class FileFormatter(logging.Formatter):
    """Formatter producing ``[timestamp] LEVEL: message`` lines."""

    def __init__(self) -> None:
        super().__init__("[%(asctime)s] %(setup_level)s: %(message)s", datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "setup_level"):
            record.setup_level = record.levelname
        return super().format(record)


class RunLogFileHandler(logging.FileHandler):
    """Append-mode file handler whose write errors reach the caller.

    The stock handler reports emit failures on stderr and continues;
    this one re-raises the original exception instead.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path, mode="a", encoding="utf-8")

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        exc = sys.exc_info()[1]
        if exc is not None:
            raise exc


class ConsoleHandler(logging.Handler):
    """Render records on a Rich console with a level symbol."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        level = getattr(record, "setup_level", record.levelname)
        marker = _CONSOLE_MARKERS.get(level)
        if marker is None:
            return
        symbol, style = marker
        self.console.print(Text(f"{symbol} {record.getMessage()}", style=style))


class SetupLogger:
    """Leveled run log writing to a file and a terminal.

    Attributes:
        path: Location of the log file.
        console: Console receiving the colored terminal output.

    Example:
        >>> with SetupLogger(Path("/tmp/setup.log")) as log:
        ...     log.success("Installed: htop")
    """

    def __init__(self, path: Path, console: Console | None = None) -> None:
        """Open the log file (creating it if absent) and attach handlers.

        Args:
            path: Log file path. Opened in append mode.
            console: Console for terminal output. Defaults to the shared console.
        """
        if console is None:
            from dotsetup.utils.formatting import console as shared_console

            console = shared_console

        self.path = path
        self.console = console

        # Not registered with the logging manager, so each run log is isolated.
        self._logger = logging.Logger(f"dotsetup.run:{path.name}", level=logging.DEBUG)
        self._logger.propagate = False

        file_handler = RunLogFileHandler(path)
        file_handler.setFormatter(FileFormatter())
        self._logger.addHandler(file_handler)
        self._logger.addHandler(ConsoleHandler(console))

    def log(self, level: LogLevel | str, message: str) -> None:
        """Record one event.

        Args:
            level: One of the LogLevel values. Other names are written
                to the file only.
            message: Message text.

        Raises:
            OSError: If the log file cannot be written.
        """
        name = level.value if isinstance(level, LogLevel) else str(level)
        levelno = _LEVEL_NUMBERS.get(name, logging.INFO)
        self._logger.log(levelno, "%s", message, extra={"setup_level": name})

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def success(self, message: str) -> None:
        self.log(LogLevel.SUCCESS, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def close(self) -> None:
        """Flush and detach all handlers."""
        for handler in self._logger.handlers[:]:
            handler.close()
            self._logger.removeHandler(handler)

    def __enter__(self) -> "SetupLogger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
