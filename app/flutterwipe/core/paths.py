"""Config file locations for flutter-wipe.

Config files are searched in the working directory first, then in the
user's home directory:

- ./flutter-wipe.toml
- ./.flutter-wipe.toml
- ~/.flutter-wipe.toml
- ~/.config/flutter-wipe/config.toml
"""

import os
from pathlib import Path

# Application identifier for file and directory naming
APP_NAME = "flutter-wipe"

CWD_CONFIG_NAMES: tuple[str, ...] = (
    f"{APP_NAME}.toml",
    f".{APP_NAME}.toml",
)

HOME_CONFIG_PATHS: tuple[str, ...] = (
    f".{APP_NAME}.toml",
    f".config/{APP_NAME}/config.toml",
)


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/flutter-wipe/ (or XDG_CONFIG_HOME/flutter-wipe/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/flutter-wipe/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def config_search_paths(cwd: Path | None = None, home: Path | None = None) -> list[Path]:
    """List candidate config files in priority order.

    Args:
        cwd: Working directory to search. Defaults to the process cwd.
        home: Home directory to search. Defaults to ``Path.home()``. If the
            home directory cannot be determined, home candidates are omitted.

    Returns:
        Candidate paths, highest priority first. Existence is not checked.
    """
    cwd = cwd if cwd is not None else Path.cwd()
    candidates = [cwd / name for name in CWD_CONFIG_NAMES]

    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            return candidates

    candidates.extend(home / rel for rel in HOME_CONFIG_PATHS)
    return candidates
