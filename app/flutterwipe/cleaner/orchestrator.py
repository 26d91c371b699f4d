"""Cleanup orchestration for discovered projects.

Runs ``flutter clean`` in each project, one at a time, after measuring
how much space its ``build`` directory occupies. A failing project never
stops the batch.
"""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from flutterwipe.utils.shell import run_command

logger = logging.getLogger(__name__)

DEFAULT_CLEAN_COMMAND: tuple[str, ...] = ("flutter", "clean")

# Directory removed by ``flutter clean`` whose size is reported as reclaimed
BUILD_DIRNAME = "build"


@dataclass(frozen=True, slots=True)
class CleanResult:
    """Result of cleaning a single project.

    Attributes:
        path: Project root that was operated on.
        success: Whether the cleanup command succeeded.
        reclaimed_bytes: Size of the build directory measured before cleaning.
        error: Diagnostic text if the command failed, None otherwise.
        dry_run: Whether the command was skipped (dry-run).
    """

    path: Path
    success: bool
    reclaimed_bytes: int = 0
    error: str | None = None
    dry_run: bool = False


@dataclass(slots=True)
class CleanupSummary:
    """Running totals for a cleanup batch."""

    cleaned: int = 0
    failed: int = 0
    reclaimed_bytes: int = 0

    def record(self, result: CleanResult) -> None:
        """Add a result to the totals."""
        if result.success:
            self.cleaned += 1
            self.reclaimed_bytes += result.reclaimed_bytes
        else:
            self.failed += 1

    @property
    def processed(self) -> int:
        """Number of projects handled so far."""
        return self.cleaned + self.failed


def measure_dir_size(path: Path) -> int:
    """Get the recursive size in bytes of the files below a directory.

    Symlinks are not followed. A missing directory, or one that cannot
    be read at all, counts as 0; unreadable entries are skipped.

    Args:
        path: Directory to measure.

    Returns:
        Total size in bytes.
    """
    total = 0
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        total += measure_dir_size(Path(entry.path))
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
                except OSError:
                    continue
    except FileNotFoundError:
        return 0
    except OSError as e:
        logger.debug("Cannot measure %s: %s", path, e)
    return total


class CleanupOrchestrator:
    """Runs the cleanup command over discovered projects.

    Args:
        command: Executable and arguments to run inside each project.
        dry_run: If True, measure and report without running the command.
    """

    def __init__(
        self,
        command: tuple[str, ...] = DEFAULT_CLEAN_COMMAND,
        *,
        dry_run: bool = False,
    ) -> None:
        self._command = command
        self._dry_run = dry_run
        self.summary = CleanupSummary()

    def measure_build_size(self, project: Path) -> int:
        """Size of a project's build directory, 0 if absent."""
        return measure_dir_size(project / BUILD_DIRNAME)

    def clean_project(self, project: Path) -> CleanResult:
        """Measure and clean a single project.

        Args:
            project: Project root directory.

        Returns:
            CleanResult for the project. Never raises for command failures.
        """
        size = self.measure_build_size(project)

        if self._dry_run:
            logger.info("Dry-run: would clean %s", project)
            return CleanResult(path=project, success=True, reclaimed_bytes=size, dry_run=True)

        try:
            result = run_command(list(self._command), cwd=project)
        except OSError as e:
            logger.debug("Cannot run %s in %s: %s", " ".join(self._command), project, e)
            return CleanResult(path=project, success=False, error=str(e))

        if not result.success:
            error = (
                result.stderr.strip()
                or result.stdout.strip()
                or f"{' '.join(self._command)} exited with code {result.returncode}"
            )
            return CleanResult(path=project, success=False, error=error)

        return CleanResult(path=project, success=True, reclaimed_bytes=size)

    def run(
        self,
        projects: Iterable[Path],
        *,
        on_start: Callable[[Path], None] | None = None,
    ) -> Iterator[CleanResult]:
        """Clean projects sequentially, updating ``summary`` as it goes.

        Args:
            projects: Project roots in the order they should be processed.
            on_start: Called with each project before it is cleaned.

        Yields:
            One CleanResult per project, as soon as it completes.
        """
        for project in projects:
            if on_start is not None:
                on_start(project)
            result = self.clean_project(project)
            self.summary.record(result)
            yield result
