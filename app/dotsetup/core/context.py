"""Run context shared by all setup steps.

The context carries the settings, the run log, and the resolved
locations (repository root, home directory, user name). Steps receive
it explicitly instead of reading ambient globals.
"""

import getpass
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from rich.console import Console

from dotsetup.core.logger import SetupLogger
from dotsetup.core.paths import get_log_path
from dotsetup.models.settings import Settings


@dataclass(slots=True)
class SetupContext:
    """Resolved state for one setup run.

    Attributes:
        settings: Validated settings.
        log: Run log for this session.
        repo_dir: Dotfiles repository root.
        home: Home directory of the target user.
        user: Name of the target user.
    """

    settings: Settings
    log: SetupLogger
    repo_dir: Path
    home: Path
    user: str

    @property
    def log_path(self) -> Path:
        """Location of the run log file."""
        return self.log.path

    def repo_path(self, relative: str) -> Path:
        """Resolve a path relative to the repository root."""
        return self.repo_dir / relative

    def home_path(self, relative: str) -> Path:
        """Resolve a path relative to the home directory."""
        return self.home / relative


def create_context(
    settings: Settings,
    *,
    repo_dir: Path | None = None,
    home: Path | None = None,
    user: str | None = None,
    started_at: datetime | None = None,
    console: Console | None = None,
) -> SetupContext:
    """Build the context for a run and open its log file.

    Args:
        settings: Validated settings.
        repo_dir: Repository root. Falls back to settings, then the
            current directory.
        home: Home directory. Defaults to the invoking user's home.
        user: User name. Defaults to the invoking user.
        started_at: Run start time used in the log file name. Defaults to now.
        console: Console for terminal log output.

    Returns:
        SetupContext with an open run log.

    Raises:
        OSError: If the log file cannot be created.
    """
    resolved_home = home or Path.home()
    resolved_repo = (repo_dir or settings.repo_dir or Path.cwd()).expanduser().resolve()
    log_path = get_log_path(started_at or datetime.now(), resolved_home)

    return SetupContext(
        settings=settings,
        log=SetupLogger(log_path, console=console),
        repo_dir=resolved_repo,
        home=resolved_home,
        user=user or getpass.getuser(),
    )
