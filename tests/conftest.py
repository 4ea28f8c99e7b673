"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterator
from datetime import datetime
from io import StringIO
from pathlib import Path

import pytest
from dotsetup.core.context import SetupContext, create_context
from dotsetup.core.theme import Palette
from dotsetup.models.settings import Settings
from rich.console import Console

# Fixed start time so log file names are predictable
RUN_STARTED_AT = datetime(2024, 1, 15, 10, 30, 0)


@pytest.fixture
def log_console() -> Console:
    """Console writing plain text to an in-memory buffer."""
    return Console(
        file=StringIO(),
        theme=Palette().to_rich_theme(),
        width=200,
        color_system=None,
    )


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Empty home directory."""
    home = tmp_path / "home-user"
    home.mkdir()
    return home


@pytest.fixture
def dotfiles_repo(tmp_path: Path) -> Path:
    """Dotfiles repository laid out like the stock settings expect."""
    repo = tmp_path / "dotfiles"

    pkg_dir = repo / "scripts" / "pkg_mgmt"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "base.lst").write_text("# Base system\nbase-devel\n\ngit\n")
    (pkg_dir / "dev.lst").write_text("neovim\n# editors above\n")
    (pkg_dir / "gui.lst").write_text("hyprland\nwaybar\n")
    (pkg_dir / "aur.lst").write_text("# AUR\nvisual-studio-code-bin\n")

    options = repo / "options"
    options.mkdir()
    (options / "nvidia.conf").write_text("env = LIBVA_DRIVER_NAME,nvidia\n")
    (options / "nvidia-dummy.conf").write_text("# no nvidia\n")
    (options / "us.conf").write_text("input { kb_layout = us }\n")
    (options / "latam.conf").write_text("input { kb_layout = latam }\n")

    (repo / "dots" / ".config" / "hypr" / "source").mkdir(parents=True)
    (repo / "home").mkdir()
    (repo / "Wallpapers").mkdir()
    (repo / "Wallpapers" / "garden.webp").write_bytes(b"RIFF....WEBP")

    return repo


@pytest.fixture
def setup_ctx(
    dotfiles_repo: Path,
    home_dir: Path,
    log_console: Console,
) -> Iterator[SetupContext]:
    """Run context over the temporary repository and home directory."""
    ctx = create_context(
        Settings(),
        repo_dir=dotfiles_repo,
        home=home_dir,
        user="tester",
        started_at=RUN_STARTED_AT,
        console=log_console,
    )
    yield ctx
    ctx.log.close()



@pytest.fixture
def log_messages(setup_ctx: SetupContext) -> Callable[[], list[str]]:
    """Read the run log as ``LEVEL: message`` lines, without timestamps."""

    def read() -> list[str]:
        lines = setup_ctx.log_path.read_text(encoding="utf-8").splitlines()
        return [line.split("] ", 1)[1] for line in lines if line.startswith("[")]

    return read


@pytest.fixture
def console_text(log_console: Console) -> Callable[[], str]:
    """Read everything printed to the in-memory console."""

    def read() -> str:
        assert isinstance(log_console.file, StringIO)
        return log_console.file.getvalue()

    return read
