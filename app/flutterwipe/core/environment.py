"""Environment variable access as an injectable capability.

Pattern building reads a handful of environment variables. Rather than
reaching into ``os.environ`` directly, callers pass an ``EnvironmentReader``
so tests can supply a plain dict.
"""

import os
from typing import Protocol


class EnvironmentReader(Protocol):
    """Anything that maps a variable name to an optional string value.

    ``os.environ`` and ``dict[str, str]`` both satisfy this protocol.
    """

    def get(self, key: str, /) -> str | None: ...


def process_environment() -> EnvironmentReader:
    """Return the real process environment."""
    return os.environ
