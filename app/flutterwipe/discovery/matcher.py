"""Exclusion matching for directory paths.

Matching is purely textual. No glob or regex semantics apply: a pattern
matches when it equals the directory name, when either of the name and
the pattern contains the other, or when it appears anywhere in the full
path. The bidirectional containment rule is intentionally loose so that
a short pattern such as ``cache`` matches ``.pub-cache``, but it also
means a pattern like ``app`` excludes a directory named ``a``. Keep
user patterns specific.
"""

from collections.abc import Collection
from pathlib import Path

# Mason brick caches are always skipped, with or without patterns
ALWAYS_EXCLUDED_SUBSTRINGS: tuple[str, ...] = (
    "mason-cache",
    "mason_cache",
)


def should_exclude(path: Path, patterns: Collection[str]) -> bool:
    """Decide whether a directory is excluded from discovery.

    Args:
        path: Directory path to test. The walker passes paths relative
            to the scan root, so only names below the root are matched.
        patterns: Exclusion patterns from ``build_pattern_set``.

    Returns:
        True if the directory (and therefore its whole subtree) must be skipped.
    """
    path_str = str(path)
    if any(marker in path_str for marker in ALWAYS_EXCLUDED_SUBSTRINGS):
        return True

    name = path.name
    if name in patterns:
        return True

    if any(pattern in name or name in pattern for pattern in patterns):
        return True

    return any(pattern in path_str for pattern in patterns)
