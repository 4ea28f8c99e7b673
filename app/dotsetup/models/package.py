"""Package models for list-driven installation.

This module defines the data structures for package lists read from
the dotfiles repository and the per-package installation results.
"""

from dataclasses import dataclass
from enum import Enum


class PackageSource(Enum):
    """Where a package list's entries come from.

    Attributes:
        REPO: Official repository packages.
        AUR: Community packages built from the Arch User Repository.
    """

    REPO = "repo"
    AUR = "aur"


@dataclass(frozen=True, slots=True)
class PackageResult:
    """Result of installing a single package.

    Attributes:
        package: Name of the package.
        source: Source of the list the package came from.
        success: Whether the install command exited with status zero.
        error: Diagnostic if the install failed, None otherwise.
    """

    package: str
    source: PackageSource
    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the install failed."""
        return not self.success
