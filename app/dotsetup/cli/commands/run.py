"""Run command implementation.

Runs the complete workstation setup: dependency check, package
installation, hardware configuration, dotfiles deployment and
finalization. This is also what a bare ``dotsetup`` invocation does.
"""

from pathlib import Path
from typing import Annotated

import typer

from dotsetup.cli.display import print_report_summary
from dotsetup.cli.prompts import build_hardware_chooser
from dotsetup.core.context import create_context
from dotsetup.core.errors import SetupError
from dotsetup.core.orchestrator import run_setup
from dotsetup.core.settings import require_settings
from dotsetup.models.hardware import GraphicsDriver, KeyboardLayout
from dotsetup.utils.formatting import print_error, print_info

# Exit status used when the run is interrupted (128 + SIGINT)
EXIT_INTERRUPTED = 130

app = typer.Typer(
    help="Run the complete workstation setup.",
    invoke_without_command=True,
)


def execute_setup(
    repo: Path | None = None,
    config: Path | None = None,
    graphics: GraphicsDriver | None = None,
    keyboard: KeyboardLayout | None = None,
    strict: bool = False,
) -> None:
    """Load settings, run the setup sequence, and map the outcome to an exit code.

    Args:
        repo: Dotfiles repository root override.
        config: Settings file override.
        graphics: Preselected graphics driver.
        keyboard: Preselected keyboard layout.
        strict: Exit non-zero if any package failed.

    Raises:
        typer.Exit: On fatal errors, interruption, or strict-mode package failures.
    """
    settings = require_settings(config)

    try:
        setup_ctx = create_context(settings, repo_dir=repo)
    except OSError as e:
        print_error(f"Cannot create log file: {e}")
        raise typer.Exit(code=1) from e

    chooser = build_hardware_chooser(settings.hardware, graphics, keyboard)

    try:
        report = run_setup(setup_ctx, chooser)
    except SetupError as e:
        print_error(f"Setup aborted: {e}")
        print_info(f"Log saved to: {setup_ctx.log_path}")
        raise typer.Exit(code=1) from e
    except (KeyboardInterrupt, typer.Abort) as e:
        setup_ctx.log.error("Setup interrupted")
        print_info(f"Log saved to: {setup_ctx.log_path}")
        raise typer.Exit(code=EXIT_INTERRUPTED) from e
    finally:
        setup_ctx.log.close()

    print_report_summary(report)

    if (strict or settings.packages.strict) and report.failed_packages:
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    repo: Annotated[
        Path | None,
        typer.Option(
            "--repo",
            "-r",
            help="Dotfiles repository root (default: settings or current directory).",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/dotsetup/settings.toml).",
            dir_okay=False,
        ),
    ] = None,
    graphics: Annotated[
        GraphicsDriver | None,
        typer.Option(
            "--graphics",
            "-g",
            help="Graphics driver variant; prompts when omitted.",
            case_sensitive=False,
        ),
    ] = None,
    keyboard: Annotated[
        KeyboardLayout | None,
        typer.Option(
            "--keyboard",
            "-k",
            help="Keyboard layout variant; prompts when omitted.",
            case_sensitive=False,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with status 1 if any package failed to install.",
        ),
    ] = False,
) -> None:
    """Run the complete workstation setup.

    Steps, in order:
      - Check that paru and stow are installed
      - Install packages from the package lists
      - Apply the graphics and keyboard config variants
      - Link the dotfiles with stow
      - Add groups, rebuild font cache, install tmux plugins,
        apply wallpaper theming, set the default shell

    Examples:
        dotsetup run                          # Interactive menus
        dotsetup run -g nvidia -k us          # No prompts
        dotsetup run --repo ~/dotfiles        # Explicit repository
    """
    if ctx.invoked_subcommand is not None:
        return

    execute_setup(
        repo=repo,
        config=config,
        graphics=graphics,
        keyboard=keyboard,
        strict=strict,
    )
