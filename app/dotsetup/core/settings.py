"""Settings file I/O operations.

This module provides functions for loading and saving settings files
in TOML format with validation using Pydantic models. A missing
settings file is not an error: the defaults describe a stock run.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from dotsetup.core.paths import get_settings_path
from dotsetup.models.settings import Settings


class SettingsError(Exception):
    """Base exception for settings-related errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


class SettingsValidationError(SettingsError):
    """Raised when settings content is invalid."""


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object. Defaults if the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsValidationError: If the content doesn't match the schema.
        SettingsError: If the file exists but cannot be read.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsValidationError(f"Invalid settings content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        settings: The Settings object to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def require_settings(path: Path | None = None) -> Settings:
    """Load settings or exit with a helpful error message.

    Convenience wrapper around load_settings() for CLI commands.

    Args:
        path: Optional custom settings path.

    Returns:
        Loaded and validated Settings.

    Raises:
        typer.Exit: If the settings cannot be loaded.
    """
    import typer

    from dotsetup.utils.formatting import print_error, print_info

    settings_path = path or get_settings_path()
    try:
        return load_settings(settings_path)
    except SettingsError as e:
        print_error(f"Failed to load settings from {settings_path}: {e}")
        print_info("Run 'dotsetup config init --force' to write a fresh settings file.")
        raise typer.Exit(code=1) from e


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings to a dictionary suitable for TOML serialization.

    TOML has no null, so unset optional values are left out.

    Args:
        settings: The Settings object to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return settings.model_dump(mode="json", exclude_none=True)
