"""XDG-compliant path management for dotsetup.

Settings live under the XDG config directory. The per-run log file is
written directly into the home directory so it is easy to find after
a fresh install.

XDG defaults:
- Config: ~/.config/dotsetup/
"""

import os
from datetime import datetime
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dotsetup"

# Log file name prefix; the start timestamp is appended per run
LOG_FILE_PREFIX = ".dotfiles_setup_"

LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dotsetup/ (or XDG_CONFIG_HOME/dotsetup/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/dotsetup/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_log_path(started_at: datetime, home: Path | None = None) -> Path:
    """Get the log file path for a run started at the given time.

    Args:
        started_at: Start time of the run, embedded in the file name.
        home: Home directory. Defaults to the invoking user's home.

    Returns:
        Path like ~/.dotfiles_setup_20240115_103000.log.
    """
    base = home or Path.home()
    return base / f"{LOG_FILE_PREFIX}{started_at.strftime(LOG_TIMESTAMP_FORMAT)}.log"
