"""Required tool checks.

Nothing is installed, copied, or linked unless every required external
tool is present.
"""

from dotsetup.core.context import SetupContext
from dotsetup.core.errors import SetupError
from dotsetup.utils.shell import command_exists

# Hints appended to the missing-tool error for well-known tools
MISSING_TOOL_HINTS: dict[str, str] = {
    "paru": "install AUR helper first",
    "stow": "install GNU Stow",
}


class MissingDependencyError(SetupError):
    """Raised when required external tools are not installed.

    Attributes:
        missing: Names of the tools that were not found.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required tools: {', '.join(missing)}")


def find_missing_tools(tools: list[str]) -> list[str]:
    """Return the tools that are not on PATH, in the given order."""
    return [tool for tool in tools if not command_exists(tool)]


def check_dependencies(ctx: SetupContext) -> None:
    """Verify that every required tool is available.

    Logs one ERROR per missing tool before failing.

    Args:
        ctx: Run context.

    Raises:
        MissingDependencyError: If any required tool is missing.
    """
    missing = find_missing_tools(ctx.settings.required_tools)

    for tool in missing:
        hint = MISSING_TOOL_HINTS.get(tool, "install it first")
        ctx.log.error(f"Missing {tool} - {hint}")

    if missing:
        raise MissingDependencyError(missing)
