"""Settings commands.

Provides commands to show the effective settings and to write a
settings file populated with the defaults.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from dotsetup.core.paths import get_settings_path
from dotsetup.core.settings import (
    SettingsError,
    require_settings,
    save_settings,
    settings_to_dict,
)
from dotsetup.models.settings import Settings
from dotsetup.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the settings file.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Settings file (default: ~/.config/dotsetup/settings.toml).",
        dir_okay=False,
    ),
]


@app.command()
def show(config: ConfigPathOption = None) -> None:
    """Print the effective settings as TOML."""
    path = config or get_settings_path()
    settings = require_settings(path)

    if path.exists():
        print_info(f"# Loaded from {path}")
    else:
        print_info(f"# {path} does not exist, showing defaults")

    console.print(tomli_w.dumps(settings_to_dict(settings)), markup=False, highlight=False)


@app.command()
def init(
    config: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file containing the defaults."""
    path = config or get_settings_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
