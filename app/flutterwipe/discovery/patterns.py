"""Exclusion pattern set construction.

Merges CLI patterns, config file patterns and default patterns into a
single immutable set of exclusion tokens. Default patterns come from a
fixed baseline of tooling and cache directory names, plus the basenames
of cache and SDK locations found through environment variables and the
home directory.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from flutterwipe.core.config import WipeConfig
from flutterwipe.core.environment import EnvironmentReader, process_environment

logger = logging.getLogger(__name__)

# Well-known directory names that never hold a project worth cleaning
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    # Version control
    ".git",
    # Build output
    "build",
    # Dart and package manager caches
    ".dart_tool",
    ".pub-cache",
    "node_modules",
    # Android and iOS tooling
    ".gradle",
    ".android",
    "Pods",
    ".symlinks",
    "ephemeral",
    # SDK installs
    "flutter",
    ".fvm",
)

# Environment variables pointing at cache or SDK roots that may live at
# non-default locations: pub package cache, Gradle cache, Flutter SDK.
ENV_PATTERN_VARIABLES: tuple[str, ...] = (
    "PUB_CACHE",
    "GRADLE_USER_HOME",
    "FLUTTER_ROOT",
)

# Cache and SDK directories probed under the user's home directory
HOME_PATTERN_SUBPATHS: tuple[str, ...] = (
    ".pub-cache",
    "fvm",
    "Android/Sdk",
    "Library/Android/sdk",
)


def build_pattern_set(
    cli_patterns: Iterable[str] = (),
    config: WipeConfig | None = None,
    no_defaults: bool = False,
    env: EnvironmentReader | None = None,
) -> frozenset[str]:
    """Build the exclusion pattern set for one discovery run.

    Args:
        cli_patterns: Patterns given with ``--exclude``, used verbatim.
        config: Loaded configuration. None behaves like an empty config.
        no_defaults: If True, skip every default pattern regardless of config.
        env: Environment to probe for cache and SDK locations. Defaults to
            the process environment.

    Returns:
        Deduplicated, immutable set of patterns. Empty strings are dropped.
    """
    config = config or WipeConfig()
    env = env if env is not None else process_environment()

    patterns: set[str] = set(cli_patterns)
    patterns.update(config.exclude)

    use_defaults = False if no_defaults else config.use_default_excludes
    if use_defaults:
        patterns.update(DEFAULT_EXCLUDE_PATTERNS)
        patterns.update(_environment_patterns(env))
        patterns.update(_home_patterns(env))

    patterns.discard("")
    logger.debug("Exclusion patterns: %s", sorted(patterns))
    return frozenset(patterns)


def _environment_patterns(env: EnvironmentReader) -> set[str]:
    """Basenames of the cache and SDK roots named by environment variables."""
    found: set[str] = set()
    for variable in ENV_PATTERN_VARIABLES:
        value = env.get(variable)
        if not value:
            continue
        name = Path(value).name
        if name:
            logger.debug("Excluding %s from %s=%s", name, variable, value)
            found.add(name)
    return found


def _home_patterns(env: EnvironmentReader) -> set[str]:
    """Basenames of the known cache directories that exist under HOME.

    A missing HOME or an unreadable home directory yields no patterns.
    """
    home = env.get("HOME")
    if not home:
        return set()

    found: set[str] = set()
    for subpath in HOME_PATTERN_SUBPATHS:
        candidate = Path(home) / subpath
        try:
            if candidate.exists():
                found.add(candidate.name)
        except OSError:
            continue
    return found
