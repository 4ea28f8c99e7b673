"""Post-install housekeeping.

Runs a fixed sequence of independent steps: group membership, font
cache, tmux plugins, wallpaper theming and default shell. No step
blocks a later one, whatever its outcome.
"""

import logging
from pathlib import Path

from dotsetup.core.context import SetupContext
from dotsetup.core.logger import OUTPUT_LEVEL
from dotsetup.models.step import StepResult, step_failed, step_ok
from dotsetup.utils.shell import CommandResult, command_exists, command_path, run_command

logger = logging.getLogger(__name__)


def _run(args: list[str], output: Path | None = None) -> CommandResult:
    """Run a command, reporting launch failures as a failed result."""
    logger.debug("Executing: %s", " ".join(args))
    try:
        return run_command(args, output=output)
    except OSError as e:
        return CommandResult(stdout="", stderr=str(e), returncode=127)


def add_user_to_groups(ctx: SetupContext) -> list[StepResult]:
    """Add the user to each configured group with sudo usermod.

    Returns:
        One StepResult per group, in order.
    """
    results: list[StepResult] = []
    for group in ctx.settings.finalize.groups:
        result = _run(["sudo", "usermod", "-aG", group, ctx.user])
        step = f"group:{group}"
        if result.success:
            ctx.log.success(f"Added user to {group} group")
            results.append(step_ok(step))
        else:
            ctx.log.error(f"Failed to add to {group} group")
            ctx.log.log(OUTPUT_LEVEL, result.diagnostic)
            results.append(step_failed(step, result.diagnostic))
    return results


def rebuild_font_cache(ctx: SetupContext) -> StepResult:
    """Rebuild the fontconfig cache; failure is only a warning."""
    result = _run(["fc-cache", "-fv"], output=ctx.log_path)
    if result.success:
        ctx.log.success("Updated font cache")
        return step_ok("fonts")

    ctx.log.warning("Font cache update failed")
    return step_failed("fonts", result.diagnostic)


def install_tmux_plugins(ctx: SetupContext) -> StepResult | None:
    """Run the tmux plugin manager's installer if it is present.

    Returns:
        StepResult, or None if the plugin manager is not installed.
    """
    tpm_dir = ctx.home_path(ctx.settings.finalize.tpm_dir)
    if not tpm_dir.is_dir():
        return None

    ctx.log.info("Installing TMUX plugins")
    result = _run(["bash", str(tpm_dir / "bin" / "install_plugins")], output=ctx.log_path)
    if result.success:
        return step_ok("tmux-plugins")

    ctx.log.warning("TMUX plugin installation failed")
    return step_failed("tmux-plugins", result.diagnostic)


def apply_wallpaper_theme(ctx: SetupContext) -> StepResult | None:
    """Generate the color theme from the wallpaper if the tool exists.

    Returns:
        StepResult, or None if the theming tool is not installed.
    """
    finalize = ctx.settings.finalize
    if not command_exists(finalize.theming_tool):
        return None

    ctx.log.info("Applying wallpaper theming")
    wallpaper = ctx.repo_path(finalize.wallpaper)
    result = _run([finalize.theming_tool, "image", str(wallpaper)], output=ctx.log_path)
    if result.success:
        return step_ok("wallpaper-theme")

    ctx.log.warning("Wallpaper theming failed")
    return step_failed("wallpaper-theme", result.diagnostic)


def set_default_shell(ctx: SetupContext) -> StepResult | None:
    """Make the configured shell the user's login shell.

    Returns:
        StepResult, or None if the shell is not installed.
    """
    shell = ctx.settings.finalize.shell
    shell_path = command_path(shell)
    if shell_path is None:
        return None

    label = Path(shell).name.capitalize()
    result = _run(["sudo", "chsh", "-s", shell_path, ctx.user])
    if result.success:
        ctx.log.success(f"Set {label} as default shell")
        return step_ok("shell", shell_path)

    ctx.log.error(f"Failed to set {label} as default shell")
    ctx.log.log(OUTPUT_LEVEL, result.diagnostic)
    return step_failed("shell", result.diagnostic)


def finalize_setup(ctx: SetupContext) -> list[StepResult]:
    """Run every post-install step in order.

    Args:
        ctx: Run context.

    Returns:
        Results of the steps that ran; skipped optional steps are absent.
    """
    ctx.log.info("Finalizing setup")

    results = add_user_to_groups(ctx)
    results.append(rebuild_font_cache(ctx))

    for optional_step in (install_tmux_plugins, apply_wallpaper_theme, set_default_shell):
        result = optional_step(ctx)
        if result is not None:
            results.append(result)

    return results
