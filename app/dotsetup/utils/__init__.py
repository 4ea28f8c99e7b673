"""Utility modules for dotsetup.

This module exports commonly used utility functions.
"""

from dotsetup.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from dotsetup.utils.shell import CommandResult, command_exists, command_path, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "command_path",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
