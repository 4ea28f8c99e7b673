"""Rich display functions for setup results.

Provides the failure summary shown after a run and the tool status
table shown by ``dotsetup check``.
"""

from rich.table import Table
from rich.text import Text

from dotsetup.models.report import SetupReport
from dotsetup.utils.formatting import console, print_success


def create_failures_table(report: SetupReport) -> Table:
    """Create a Rich table listing everything that failed in a run.

    Args:
        report: Report of a completed run.

    Returns:
        Rich Table with Kind, Name and Error columns.
    """
    table = Table(
        title="Failures",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Kind", width=8)
    table.add_column("Name", no_wrap=True)
    table.add_column("Error")

    for package in report.failed_packages:
        table.add_row(
            f"[error]{package.source.value}[/error]",
            Text(package.package),
            Text(package.error or "Unknown error", style="muted"),
        )

    for step in report.failed_steps:
        table.add_row(
            "[warning]step[/warning]",
            Text(step.step),
            Text(step.error or "Unknown error", style="muted"),
        )

    return table


def print_report_summary(report: SetupReport) -> None:
    """Print counts for a run and a failure table if anything failed.

    Args:
        report: Report of a completed run.
    """
    installed = sum(1 for r in report.packages if r.success)
    failed = len(report.failed_packages)

    if not report.has_failures:
        print_success(f"All {installed} package(s) and setup steps completed successfully.")
        return

    console.print(
        f"\n[success]{installed} package(s) installed[/success], "
        f"[error]{failed} package(s) failed[/error], "
        f"[warning]{len(report.failed_steps)} step(s) failed[/warning]"
    )
    console.print(create_failures_table(report))


def create_tools_table(tools: dict[str, bool], required: set[str]) -> Table:
    """Create a Rich table showing which external tools are installed.

    Args:
        tools: Tool name to availability, in display order.
        required: Names of the tools the run cannot start without.

    Returns:
        Rich Table with Status, Tool and Role columns.
    """
    table = Table(
        title="External Tools",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Tool", no_wrap=True)
    table.add_column("Role")

    for tool, available in tools.items():
        if available:
            status = "[success]OK[/success]"
        elif tool in required:
            status = "[error]MISSING[/error]"
        else:
            status = "[warning]absent[/warning]"
        role = "required" if tool in required else "optional"
        table.add_row(status, Text(tool), Text(role, style="muted"))

    return table
