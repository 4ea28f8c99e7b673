"""Main CLI application entry point.

Defines the Typer application and global options. Invoking
``dotsetup`` without a subcommand runs the complete setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dotsetup import __version__
from dotsetup.cli.commands import check, config, run
from dotsetup.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="dotsetup",
    help="Workstation setup from an Arch Linux dotfiles repository.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dotsetup version {__version__}")
        raise typer.Exit()


def configure_debug_logging() -> None:
    """Send dotsetup's internal debug logging to stderr via Rich."""
    package_logger = logging.getLogger("dotsetup")
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    handler = RichHandler(console=err_console, show_time=False, show_path=False, keywords=[])
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show internal debug output.",
        ),
    ] = False,
) -> None:
    """dotsetup - Workstation setup from an Arch Linux dotfiles repository.

    Installs packages, applies hardware config variants, links dotfiles
    and finishes post-install housekeeping. Without a subcommand the
    complete setup runs with interactive hardware menus.
    """
    if verbose:
        configure_debug_logging()

    if ctx.invoked_subcommand is None:
        run.execute_setup()


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(check.app, name="check")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
