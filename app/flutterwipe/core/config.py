"""flutter-wipe configuration file model and loader.

The config file is a small TOML document with two optional keys:

    exclude = ["legacy", "third_party"]
    default_excludes = true

See ``flutterwipe.core.paths`` for the locations that are searched.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flutterwipe.core.paths import config_search_paths

logger = logging.getLogger(__name__)


class WipeConfig(BaseModel):
    """User configuration for project discovery.

    Attributes:
        exclude: Extra exclusion patterns merged with CLI patterns.
        default_excludes: Whether the built-in and environment-derived
            patterns apply. None means the file does not say, which
            behaves as True.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Additional exclusion patterns"),
    ]
    default_excludes: Annotated[
        bool | None,
        Field(description="Apply default exclusion patterns (unset = true)"),
    ] = None

    @property
    def use_default_excludes(self) -> bool:
        """Whether default patterns apply according to this config alone."""
        return True if self.default_excludes is None else self.default_excludes


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when a config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when a config file is not valid TOML."""


def find_config_file(
    explicit: Path | None = None,
    *,
    cwd: Path | None = None,
    home: Path | None = None,
) -> Path | None:
    """Locate the config file to use.

    An explicit path wins when it exists. Otherwise the working-directory
    and home-directory candidates are tried in order.

    Args:
        explicit: Path given on the command line, if any.
        cwd: Working directory override (for tests).
        home: Home directory override (for tests).

    Returns:
        The first existing candidate, or None if there is none.
    """
    if explicit is not None:
        if explicit.is_file():
            return explicit
        logger.debug("Explicit config %s does not exist, searching defaults", explicit)

    for candidate in config_search_paths(cwd, home):
        try:
            if candidate.is_file():
                logger.debug("Using config file %s", candidate)
                return candidate
        except OSError:
            continue

    return None


def load_config(path: Path) -> WipeConfig:
    """Load and validate a config file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Validated WipeConfig.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    try:
        return WipeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {path}: {e}") from e
