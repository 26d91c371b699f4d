"""Rich display functions for scan and cleanup output."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from flutterwipe.cleaner.orchestrator import CleanResult, CleanupSummary
from flutterwipe.utils.formatting import console, format_size


def print_project_header(project: Path) -> None:
    """Print the project path line that precedes its outcome."""
    console.print()
    console.print(f"[project]{escape(str(project))}[/]", highlight=False)


def print_clean_result(result: CleanResult) -> None:
    """Print the outcome line for one cleaned project."""
    if result.success:
        console.print(
            f"  [success]✓ Cleaned[/] [info]Reclaimed:[/] "
            f"[size]{format_size(result.reclaimed_bytes)}[/]"
        )
    else:
        error = escape(result.error or "unknown error")
        console.print(f"  [error]✗ Failed:[/] {error}", highlight=False)


def create_dry_run_table(results: list[CleanResult]) -> Table:
    """Create a table listing projects and their reclaimable build size.

    Args:
        results: Dry-run results in discovery order.

    Returns:
        Rich Table with one row per project.
    """
    table = Table(
        title="Flutter Projects (Dry Run)",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Project", style="project", no_wrap=True)
    table.add_column("Build Size", style="size", justify="right")

    for result in results:
        table.add_row(str(result.path), format_size(result.reclaimed_bytes))

    return table


def print_summary(summary: CleanupSummary, *, dry_run: bool = False) -> None:
    """Print the framed summary line.

    Example::

        ==========================================================
        = Processed 3 projects. Total space reclaimed: 412.7 MB =
        ==========================================================
    """
    size = format_size(summary.reclaimed_bytes)
    if dry_run:
        text = f"Found {summary.processed} projects. Total space reclaimable: {size}"
    else:
        text = f"Processed {summary.cleaned} projects. Total space reclaimed: {size}"

    rule = "=" * (len(text) + 4)
    console.print()
    console.print(f"[success]{rule}[/]")
    console.print(f"[success]=[/] [summary]{text}[/] [success]=[/]", highlight=False)
    console.print(f"[success]{rule}[/]")
