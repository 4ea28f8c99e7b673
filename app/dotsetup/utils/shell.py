"""Shell execution utilities.

Provides subprocess execution with explicit results, optionally
redirecting command output into the run log.
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command (empty when redirected).
        stderr: Standard error from the command (empty when redirected).
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def diagnostic(self) -> str:
        """Best available explanation for a failed command."""
        detail = self.stderr.strip() or self.stdout.strip()
        return detail or f"exit status {self.returncode}"


def run_command(args: list[str], *, output: Path | None = None) -> CommandResult:
    """Execute a command and wait for it to finish.

    A non-zero exit status is reported in the result, never raised.

    Args:
        args: Command and arguments to execute.
        output: If given, stdout and stderr are appended to this file
            instead of being captured.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        FileNotFoundError: If command executable is not found.
    """
    if output is not None:
        with open(output, "a", encoding="utf-8") as sink:
            result = subprocess.run(
                args,
                stdout=sink,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        return CommandResult(stdout="", stderr="", returncode=result.returncode)

    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def command_path(name: str) -> str | None:
    """Resolve a command name to its absolute path on PATH.

    Args:
        name: Command name to resolve.

    Returns:
        Absolute path to the executable, or None if not found.
    """
    return shutil.which(name)
