"""CLI commands for dotsetup.

This package contains all subcommand implementations.
"""

from dotsetup.cli.commands import check, config, run

__all__ = ["check", "config", "run"]
