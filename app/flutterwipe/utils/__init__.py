"""Utility modules for flutter-wipe.

This module exports commonly used utility functions.
"""

from flutterwipe.utils.formatting import (
    configure_logging,
    console,
    err_console,
    format_size,
    print_info,
    print_success,
    print_warning,
)
from flutterwipe.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "configure_logging",
    "console",
    "err_console",
    "format_size",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
