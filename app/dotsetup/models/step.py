"""Step result model.

Every external invocation made outside of package installation (file
copies, stow runs, group changes, font cache, plugin and theming
tools, shell change) is reported as a StepResult.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StepResult:
    """Result of executing a single setup step.

    Attributes:
        step: Short identifier of the step (e.g., "group:video").
        success: Whether the step completed successfully.
        message: Optional success message or additional information.
        error: Optional error message if the step failed.
    """

    step: str
    success: bool
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the step failed."""
        return not self.success


def step_ok(step: str, message: str | None = None) -> StepResult:
    """Create a successful StepResult."""
    return StepResult(step=step, success=True, message=message)


def step_failed(step: str, error: str) -> StepResult:
    """Create a failed StepResult."""
    return StepResult(step=step, success=False, error=error)
