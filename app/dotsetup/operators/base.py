"""Abstract base class for package operators.

This module defines the Operator interface that package installation
backends implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from dotsetup.models.package import PackageResult, PackageSource


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators install packages one at a time so that a single failure
    never affects the remaining packages.

    Attributes:
        output: File receiving the raw command output, or None to capture it.

    Example:
        >>> operator = ParuOperator(output=Path("/tmp/setup.log"))
        >>> result = operator.install_package("htop")
        >>> print(f"{result.package}: {result.success}")
    """

    def __init__(self, output: Path | None = None) -> None:
        """Initialize the operator.

        Args:
            output: File that command output is appended to.
        """
        self._output = output

    @property
    def output(self) -> Path | None:
        """File receiving command output."""
        return self._output

    @property
    @abstractmethod
    def executable(self) -> str:
        """Return the package manager executable name."""

    @abstractmethod
    def install_package(
        self,
        package: str,
        source: PackageSource = PackageSource.REPO,
    ) -> PackageResult:
        """Install a single package.

        Args:
            package: Package name.
            source: Source of the list the package came from.

        Returns:
            PackageResult for the package. Never raises for a failed install.
        """
