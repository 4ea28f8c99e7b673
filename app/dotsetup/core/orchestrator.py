"""Setup orchestration.

Runs the setup steps in their fixed order. Fatal steps raise a
SetupError subclass and nothing after them runs; all other failures
are recorded in the returned report.
"""

from collections.abc import Callable

from dotsetup.core.context import SetupContext
from dotsetup.core.dependencies import check_dependencies
from dotsetup.core.dotfiles import deploy_dotfiles
from dotsetup.core.finalize import finalize_setup
from dotsetup.core.hardware import configure_hardware
from dotsetup.core.packages import install_packages
from dotsetup.models.hardware import HardwareSelection
from dotsetup.models.report import SetupReport
from dotsetup.utils.formatting import print_completion, print_header

# Called after package installation to obtain the hardware choices
HardwareChooser = Callable[[], HardwareSelection]


def run_setup(
    ctx: SetupContext,
    choose_hardware: HardwareChooser,
    *,
    show_banners: bool = True,
) -> SetupReport:
    """Run the complete setup sequence.

    Order: header, dependency check, packages, hardware, dotfiles,
    finalization, completion banner.

    Args:
        ctx: Run context.
        choose_hardware: Supplies the hardware selection. Invoked only
            once packages are installed, so interactive menus appear at
            that point of the run.
        show_banners: Print the header and completion banners.

    Returns:
        SetupReport with the results of every step.

    Raises:
        MissingDependencyError: If a required tool is missing.
        PackageListMissingError: If a required package list is missing.
        PackageListReadError: If a package list cannot be read.
        DeploymentError: If linking the dotfiles fails.
    """
    report = SetupReport()

    if show_banners:
        print_header()

    check_dependencies(ctx)
    report.packages = install_packages(ctx)
    report.hardware = configure_hardware(ctx, choose_hardware())
    report.dotfiles = deploy_dotfiles(ctx)
    report.finalize = finalize_setup(ctx)

    if show_banners:
        print_completion(ctx.log_path)

    return report
