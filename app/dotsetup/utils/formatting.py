"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Messages
passed to the print helpers are shown literally, never parsed as markup.
"""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from dotsetup.core.theme import get_theme

HEADER_ART = r"""  /\_/\           /\\
 ( o.o )  [Dotfiles Setup]
  > ^ <   [Initializing...]
   /  \
  /    \
"""

COMPLETION_ART = r"""  /\_/\
 ( ◕ᴗ◕ )
  /  づづ
 System Ready!
"""


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_header() -> None:
    """Clear the terminal and print the setup banner."""
    console.clear()
    console.print(Text(HEADER_ART, style="header"))
    console.print("[banner]>> Automated System Configuration <<[/]\n")


def print_completion(log_path: Path) -> None:
    """Print the completion banner naming the log file.

    Args:
        log_path: Location of this run's log file.
    """
    console.print("\n[success]✓ Setup Complete![/]")
    console.print(f"[banner]Log saved to: {escape(str(log_path))}[/]")
    console.print(Text(COMPLETION_ART, style="header"))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
