"""Main CLI application entry point.

Scans a directory tree for Flutter projects, then runs ``flutter clean``
in each one and reports the space reclaimed from their build directories.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Annotated

import typer

from flutterwipe import __version__
from flutterwipe.cleaner.orchestrator import DEFAULT_CLEAN_COMMAND, CleanupOrchestrator
from flutterwipe.cli.display import (
    create_dry_run_table,
    print_clean_result,
    print_project_header,
    print_summary,
)
from flutterwipe.core.config import ConfigError, WipeConfig, find_config_file, load_config
from flutterwipe.discovery.patterns import build_pattern_set
from flutterwipe.discovery.walker import discover_projects
from flutterwipe.utils.formatting import (
    configure_logging,
    console,
    print_info,
    print_success,
    print_warning,
)
from flutterwipe.utils.shell import command_exists

app = typer.Typer(
    name="flutter-wipe",
    help="Find Flutter projects and run flutter clean in each of them.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"flutter-wipe version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path,
        typer.Option(
            "--directory",
            "-d",
            metavar="PATH",
            help="The directory to scan for Flutter projects.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = Path("."),
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            metavar="PATTERN",
            help="Skip directories matching PATTERN. Repeatable.",
        ),
    ] = None,
    no_default_excludes: Annotated[
        bool,
        typer.Option(
            "--no-default-excludes",
            help="Do not skip build output, caches and SDK directories by default.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            metavar="FILE",
            help="Config file to use instead of the default locations.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="List projects and reclaimable space without cleaning.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Scan for Flutter projects and clean them."""
    configure_logging(verbose)

    config = _resolve_config(config_path)
    patterns = build_pattern_set(exclude or [], config, no_default_excludes)
    projects = _scan(directory, patterns)

    if not projects:
        console.print("[warning]No Flutter projects found.[/]")
        return

    orchestrator = CleanupOrchestrator(dry_run=dry_run)

    if dry_run:
        results = list(orchestrator.run(projects))
        console.print(create_dry_run_table(results))
        print_summary(orchestrator.summary, dry_run=True)
        return

    executable = DEFAULT_CLEAN_COMMAND[0]
    if not command_exists(executable):
        print_warning(f"'{executable}' was not found on PATH")

    console.print(f"[header]Found {len(projects)} Flutter projects. Cleaning...[/]")
    for result in orchestrator.run(projects, on_start=print_project_header):
        print_clean_result(result)

    print_summary(orchestrator.summary)

    if orchestrator.summary.failed:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _resolve_config(explicit: Path | None) -> WipeConfig:
    """Find and load the config file, falling back to defaults on any problem."""
    path = find_config_file(explicit)
    if explicit is not None and path != explicit:
        print_warning(f"Config file not found: {explicit}")

    if path is None:
        return WipeConfig()

    try:
        config = load_config(path)
    except ConfigError as e:
        print_warning(f"{e} (using defaults)")
        return WipeConfig()

    print_info(f"Using config {path}")
    return config


def _scan(directory: Path, patterns: frozenset[str]) -> list[Path]:
    """Run discovery on a worker thread while a spinner animates."""
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(discover_projects, directory, patterns)
        with console.status("[info]Scanning for Flutter projects...[/]", spinner="dots"):
            projects = future.result()
    print_success("Scan complete.")
    return projects


if __name__ == "__main__":
    app()
