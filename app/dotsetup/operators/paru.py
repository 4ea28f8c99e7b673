"""Paru package operator implementation.

Installs repository and AUR packages through the paru AUR helper.
"""

import logging
from pathlib import Path

from dotsetup.models.package import PackageResult, PackageSource
from dotsetup.operators.base import Operator
from dotsetup.utils.shell import run_command

logger = logging.getLogger(__name__)


class ParuOperator(Operator):
    """Operator for pacman and AUR packages via paru.

    Each package is installed with ``--needed`` so packages that are
    already up to date are skipped, and ``--noconfirm`` so paru never
    prompts.
    """

    def __init__(self, output: Path | None = None, executable: str = "paru") -> None:
        """Initialize the operator.

        Args:
            output: File that paru output is appended to.
            executable: Name or path of the paru-compatible helper.
        """
        super().__init__(output=output)
        self._executable = executable

    @property
    def executable(self) -> str:
        """Return the helper executable."""
        return self._executable

    def build_args(self, package: str) -> list[str]:
        """Build the install command line for a package."""
        return [self._executable, "-S", "--needed", "--noconfirm", package]

    def install_package(
        self,
        package: str,
        source: PackageSource = PackageSource.REPO,
    ) -> PackageResult:
        """Install a single package with paru.

        Args:
            package: Package name.
            source: Source of the list the package came from.

        Returns:
            PackageResult; a helper that cannot be launched counts as a failure.
        """
        logger.debug("Executing %s for package %s (%s)", self._executable, package, source.value)

        try:
            result = run_command(self.build_args(package), output=self._output)
        except OSError as e:
            return PackageResult(package=package, source=source, success=False, error=str(e))

        if result.success:
            return PackageResult(package=package, source=source, success=True)

        return PackageResult(
            package=package,
            source=source,
            success=False,
            error=result.diagnostic,
        )
