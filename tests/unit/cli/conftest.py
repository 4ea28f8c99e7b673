"""Fixtures for CLI command tests."""

from pathlib import Path

import dotsetup.utils.formatting as fmt_mod
import pytest


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings directory at a temporary location.

    Also widens the shared consoles so long paths are printed on one line.
    """
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.setattr(fmt_mod.console, "width", 300)
    monkeypatch.setattr(fmt_mod.err_console, "width", 300)
    return xdg / "dotsetup"
