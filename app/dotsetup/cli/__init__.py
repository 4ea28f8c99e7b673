"""CLI package for dotsetup.

This package contains the Typer application and all subcommands.
"""

from dotsetup.cli.main import app

__all__ = ["app"]
