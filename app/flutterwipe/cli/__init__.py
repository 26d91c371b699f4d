"""CLI package for flutter-wipe.

This package contains the Typer application.
"""

from flutterwipe.cli.main import app

__all__ = ["app"]
