"""Dotfiles deployment with GNU Stow.

Two trees are linked: the config tree into ``~/.config`` and the home
tree into ``~``. Unlike package installation, a failed link aborts the
run; the home tree is never linked if the config tree failed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from dotsetup.core.context import SetupContext
from dotsetup.core.errors import SetupError
from dotsetup.core.logger import OUTPUT_LEVEL
from dotsetup.models.step import StepResult, step_ok
from dotsetup.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)


class DeploymentError(SetupError):
    """Raised when a stow run fails.

    Attributes:
        step: Identifier of the failed deployment step.
    """

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class StowStep:
    """One stow invocation and its log messages.

    Attributes:
        name: Step identifier.
        tree: Stow package directory whose contents are linked.
        target: Directory the links are created in.
        linked: SUCCESS message.
        failed: ERROR message.
    """

    name: str
    tree: Path
    target: Path
    linked: str
    failed: str


def build_stow_args(stow: str, tree: Path, target: Path) -> list[str]:
    """Build the stow command line linking ``tree``'s contents into ``target``."""
    return [stow, "-d", str(tree.parent), "-t", str(target), tree.name]


def get_stow_steps(ctx: SetupContext) -> list[StowStep]:
    """Resolve the deployment steps, in execution order."""
    dotfiles = ctx.settings.dotfiles
    return [
        StowStep(
            name="stow:config",
            tree=ctx.repo_path(dotfiles.config_tree),
            target=ctx.home_path(dotfiles.config_target),
            linked="Linked .config directories",
            failed="Failed to stow .config files",
        ),
        StowStep(
            name="stow:home",
            tree=ctx.repo_path(dotfiles.home_tree),
            target=ctx.home,
            linked="Linked home directories",
            failed="Failed to stow home files",
        ),
    ]


def _run_stow(ctx: SetupContext, step: StowStep) -> CommandResult:
    """Run stow for a step, reporting launch failures as a failed result."""
    args = build_stow_args(ctx.settings.dotfiles.stow, step.tree, step.target)
    logger.debug("Executing: %s", " ".join(args))
    try:
        step.target.mkdir(parents=True, exist_ok=True)
        return run_command(args)
    except OSError as e:
        return CommandResult(stdout="", stderr=str(e), returncode=127)


def deploy_dotfiles(ctx: SetupContext) -> list[StepResult]:
    """Link the config tree and the home tree into the home directory.

    Args:
        ctx: Run context.

    Returns:
        One StepResult per linked tree.

    Raises:
        DeploymentError: On the first failed stow run.
    """
    ctx.log.info("Deploying dotfiles")

    results: list[StepResult] = []
    for step in get_stow_steps(ctx):
        result = _run_stow(ctx, step)
        if not result.success:
            ctx.log.error(step.failed)
            ctx.log.log(OUTPUT_LEVEL, result.diagnostic)
            raise DeploymentError(step.name, step.failed)

        ctx.log.success(step.linked)
        results.append(step_ok(step.name, f"{step.tree} -> {step.target}"))

    return results
