"""Package list reading and installation.

Package lists are plain text files with one package name per line.
Blank lines and lines starting with ``#`` are ignored. Lists are
processed in policy-table order; each package is installed on its own
so one failure never stops the rest.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from dotsetup.core.context import SetupContext
from dotsetup.core.errors import SetupError
from dotsetup.models.package import PackageResult, PackageSource
from dotsetup.models.settings import PackageListEntry
from dotsetup.operators.base import Operator
from dotsetup.operators.paru import ParuOperator

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class PackageListMissingError(SetupError):
    """Raised when a required package list file does not exist.

    Attributes:
        path: The missing list file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Missing package list: {path}")


class PackageListReadError(SetupError):
    """Raised when a package list exists but cannot be read or decoded.

    Attributes:
        path: The unreadable list file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read package list {path}: {reason}")


def parse_package_lines(lines: Iterable[str]) -> list[str]:
    """Extract package names from list file lines.

    Args:
        lines: Raw lines, with or without line endings.

    Returns:
        Package names in order; blanks and comments removed.
    """
    packages: list[str] = []
    for line in lines:
        name = line.strip()
        if not name or name.startswith(COMMENT_PREFIX):
            continue
        packages.append(name)
    return packages


def read_package_list(path: Path) -> list[str]:
    """Read package names from a list file.

    Args:
        path: List file path.

    Returns:
        Package names in file order.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8") as f:
        return parse_package_lines(f)


def install_packages(
    ctx: SetupContext,
    lists: list[PackageListEntry] | None = None,
    operator: Operator | None = None,
) -> list[PackageResult]:
    """Install every package from the given lists.

    Args:
        ctx: Run context.
        lists: Package list policy table. Defaults to the settings' lists.
        operator: Install backend. Defaults to paru writing to the run log.

    Returns:
        PackageResult for every package, in processing order.

    Raises:
        PackageListMissingError: If a required list file does not exist.
            Lists before it have already been processed.
        PackageListReadError: If a list file cannot be read or decoded.
    """
    if lists is None:
        lists = ctx.settings.packages.lists
    if operator is None:
        operator = ParuOperator(output=ctx.log_path, executable=ctx.settings.packages.helper)

    ctx.log.info("Starting package installation")

    results: list[PackageResult] = []
    for entry in lists:
        path = ctx.repo_path(entry.path)
        source = entry.package_source

        if not path.is_file():
            if entry.required:
                ctx.log.error(f"Missing package list: {path}")
                raise PackageListMissingError(path)
            ctx.log.warning(f"Skipping optional package list: {path}")
            continue

        if source == PackageSource.AUR:
            ctx.log.info("Installing AUR packages")
        else:
            ctx.log.info(f"Installing packages from: {path.name}")

        try:
            packages = read_package_list(path)
        except (OSError, UnicodeDecodeError) as e:
            ctx.log.error(f"Cannot read package list {path}: {e}")
            raise PackageListReadError(path, str(e)) from e
        logger.debug("Read %d package(s) from %s", len(packages), path)

        for package in packages:
            result = operator.install_package(package, source)
            _log_package_result(ctx, result)
            results.append(result)

    return results


def _log_package_result(ctx: SetupContext, result: PackageResult) -> None:
    """Write the SUCCESS/ERROR line for one package."""
    if result.source == PackageSource.AUR:
        if result.success:
            ctx.log.success(f"Installed AUR: {result.package}")
        else:
            ctx.log.error(f"Failed AUR: {result.package}")
        return

    if result.success:
        ctx.log.success(f"Installed: {result.package}")
    else:
        ctx.log.error(f"Failed to install: {result.package}")
