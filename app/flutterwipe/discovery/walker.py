"""Directory tree walker for Flutter project discovery.

Walks a directory tree top-down, pruning excluded directories before
they are listed and collecting every directory that classifies as a
Flutter project root. Nested projects are found independently: a
project root is still descended into.
"""

import logging
import os
from collections.abc import Callable, Collection, Iterator
from pathlib import Path

from flutterwipe.discovery.classifier import is_project_root
from flutterwipe.discovery.matcher import should_exclude

logger = logging.getLogger(__name__)


class ProjectWalker:
    """Finds Flutter project roots below a directory.

    The pattern set is only read, never modified, so a walker can run
    on a worker thread while other code holds the same set.

    Args:
        patterns: Exclusion patterns from ``build_pattern_set``.
        classifier: Predicate deciding whether a directory is a project
            root. Defaults to ``is_project_root``.
    """

    def __init__(
        self,
        patterns: Collection[str],
        *,
        classifier: Callable[[Path], bool] = is_project_root,
    ) -> None:
        self._patterns = patterns
        self._classifier = classifier

    def walk(self, root: Path) -> Iterator[Path]:
        """Yield project roots below (and including) ``root``.

        Directories are visited depth-first in pre-order, children in
        sorted name order. Excluded directories are neither classified
        nor entered. Symlinked directories are not followed.
        Directories that cannot be listed are skipped.

        Patterns are matched against each directory's path relative to
        ``root``, so the names of the root and its ancestors never cause
        an exclusion. The root itself is always scanned.

        Args:
            root: Directory to scan.

        Yields:
            Absolute paths of project roots in traversal order.
        """
        root = Path(root).expanduser().resolve()
        if not root.is_dir():
            logger.warning("Not a directory, nothing to scan: %s", root)
            return

        for dirpath, dirnames, _filenames in os.walk(root, onerror=self._on_error):
            current = Path(dirpath)
            relative = current.relative_to(root)
            # Prune in place so os.walk never descends into excluded subtrees
            dirnames[:] = sorted(name for name in dirnames if not self._excluded(relative / name))

            if self._classifier(current):
                logger.debug("Found project: %s", current)
                yield current

    def _excluded(self, path: Path) -> bool:
        if should_exclude(path, self._patterns):
            logger.debug("Pruned: %s", path)
            return True
        return False

    @staticmethod
    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)


def iter_projects(root: Path, patterns: Collection[str]) -> Iterator[Path]:
    """Lazily yield Flutter project roots below ``root``."""
    return ProjectWalker(patterns).walk(root)


def discover_projects(root: Path, patterns: Collection[str]) -> list[Path]:
    """Collect Flutter project roots below ``root``.

    Args:
        root: Directory to scan.
        patterns: Exclusion patterns from ``build_pattern_set``.

    Returns:
        Project roots in depth-first pre-order.
    """
    return list(iter_projects(root, patterns))
