"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

FLUTTER_PUBSPEC = """name: sample_app
description: A sample Flutter application.
version: 1.0.0+1

environment:
  sdk: ">=3.0.0 <4.0.0"

dependencies:
  flutter:
    sdk: flutter
  cupertino_icons: ^1.0.6

dev_dependencies:
  flutter_test:
    sdk: flutter
"""

DART_PUBSPEC = """name: plain_dart
version: 0.1.0

dependencies:
  path: ^1.9.0
  http: ^1.2.0
"""


@pytest.fixture(autouse=True)
def _isolate_root_logger() -> Iterator[None]:
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def flutter_pubspec() -> str:
    """A typical Flutter app pubspec.yaml."""
    return FLUTTER_PUBSPEC


@pytest.fixture
def dart_pubspec() -> str:
    """A pure Dart package pubspec.yaml (no flutter dependency)."""
    return DART_PUBSPEC


@pytest.fixture
def make_project() -> Callable[..., Path]:
    """Factory creating a directory with a pubspec.yaml.

    Call as ``make_project(path)`` for a Flutter project or pass
    ``pubspec=...`` for custom manifest content.
    """

    def _make(path: Path, pubspec: str = FLUTTER_PUBSPEC) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        (path / "pubspec.yaml").write_text(pubspec)
        return path

    return _make
