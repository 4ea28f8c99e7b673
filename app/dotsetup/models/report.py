"""Aggregated results of a setup run."""

from dataclasses import dataclass, field

from dotsetup.models.package import PackageResult
from dotsetup.models.step import StepResult


@dataclass(slots=True)
class SetupReport:
    """Everything a completed run produced.

    Attributes:
        packages: Per-package install results in processing order.
        hardware: Results of the hardware variant copies.
        dotfiles: Results of the stow runs.
        finalize: Results of the post-install steps that ran.
    """

    packages: list[PackageResult] = field(default_factory=list)
    hardware: list[StepResult] = field(default_factory=list)
    dotfiles: list[StepResult] = field(default_factory=list)
    finalize: list[StepResult] = field(default_factory=list)

    @property
    def failed_packages(self) -> list[PackageResult]:
        """Packages whose install failed."""
        return [r for r in self.packages if r.failed]

    @property
    def failed_steps(self) -> list[StepResult]:
        """Non-package steps that failed."""
        return [r for r in (*self.hardware, *self.dotfiles, *self.finalize) if r.failed]

    @property
    def has_failures(self) -> bool:
        """Check if anything in the run failed."""
        return bool(self.failed_packages or self.failed_steps)
