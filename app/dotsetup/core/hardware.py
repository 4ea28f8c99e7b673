"""Hardware-specific configuration.

Copies the selected graphics and keyboard variant files over their
fixed destinations. The choice itself is made by the caller (CLI
options, settings, or the interactive menus in dotsetup.cli.prompts).
"""

import logging
import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile

from dotsetup.core.context import SetupContext
from dotsetup.models.hardware import HardwareSelection, HardwareVariant
from dotsetup.models.step import StepResult, step_failed, step_ok

logger = logging.getLogger(__name__)


def copy_variant(source: Path, destination: Path) -> None:
    """Copy a variant file over the destination, replacing it atomically.

    The content is written to a temporary file next to the destination
    and renamed into place, so the destination is either the old file
    or the complete new one. The destination directory must exist.

    Args:
        source: Variant file to copy.
        destination: File to overwrite.

    Raises:
        OSError: If the source cannot be read or the destination written.
    """
    tmp_path: Path | None = None
    try:
        with (
            open(source, "rb") as src,
            NamedTemporaryFile(
                mode="wb",
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".tmp",
                delete=False,
            ) as dst,
        ):
            tmp_path = Path(dst.name)
            shutil.copyfileobj(src, dst)
        shutil.copymode(source, tmp_path)
        os.replace(tmp_path, destination)
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def apply_variant(ctx: SetupContext, variant: HardwareVariant) -> StepResult:
    """Install one variant file and log the outcome.

    Args:
        ctx: Run context.
        variant: Variant to apply.

    Returns:
        StepResult; a failed copy is logged as an ERROR, not raised.
    """
    hardware = ctx.settings.hardware
    source = ctx.repo_path(hardware.options_dir) / variant.source
    destination = ctx.repo_path(hardware.target_dir) / variant.destination
    step = f"hardware:{variant.destination}"

    logger.debug("Copying %s -> %s", source, destination)
    try:
        copy_variant(source, destination)
    except OSError as e:
        ctx.log.error(f"Failed to apply {variant.label}: {e}")
        return step_failed(step, str(e))

    ctx.log.success(f"Applied {variant.label}")
    return step_ok(step, f"{source.name} -> {destination}")


def configure_hardware(ctx: SetupContext, selection: HardwareSelection) -> list[StepResult]:
    """Apply the graphics and keyboard variants for a selection.

    Args:
        ctx: Run context.
        selection: Hardware choices to apply.

    Returns:
        One StepResult per variant, graphics first.
    """
    ctx.log.info("Configuring hardware settings")
    return [apply_variant(ctx, variant) for variant in selection.variants]
