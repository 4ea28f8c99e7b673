"""Check command implementation.

Reports which external tools are installed without changing anything.
"""

from pathlib import Path
from typing import Annotated

import typer

from dotsetup.cli.display import create_tools_table
from dotsetup.core.dependencies import find_missing_tools
from dotsetup.core.settings import require_settings
from dotsetup.models.settings import Settings
from dotsetup.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Check that required external tools are installed.",
    invoke_without_command=True,
)

# Tools used by individual steps; their absence only skips or fails that step
OPTIONAL_TOOLS: tuple[str, ...] = ("sudo", "fc-cache", "bash")


def collect_tools(settings: Settings) -> list[str]:
    """List every external tool a run may invoke, required ones first.

    Args:
        settings: Settings naming the configurable tools.

    Returns:
        Tool names without duplicates.
    """
    finalize = settings.finalize
    names = [
        *settings.required_tools,
        *OPTIONAL_TOOLS,
        finalize.theming_tool,
        finalize.shell,
    ]
    return list(dict.fromkeys(names))


@app.callback(invoke_without_command=True)
def check(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/dotsetup/settings.toml).",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Check that required external tools are installed.

    Exits with status 1 if a required tool (the AUR helper or stow)
    is missing. Optional tools are listed for information only.
    """
    if ctx.invoked_subcommand is not None:
        return

    settings = require_settings(config)
    tools = collect_tools(settings)
    missing = set(find_missing_tools(tools))
    required = set(settings.required_tools)

    console.print(
        create_tools_table({tool: tool not in missing for tool in tools}, required)
    )

    missing_required = sorted(missing & required)
    if missing_required:
        print_error(f"Missing required tools: {', '.join(missing_required)}")
        raise typer.Exit(code=1)

    print_success("All required tools are installed.")
