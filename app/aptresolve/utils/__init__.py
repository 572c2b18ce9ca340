"""Utility modules for aptresolve.

This module exports commonly used utility functions.
"""

from aptresolve.utils.formatting import (
    console,
    create_state_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from aptresolve.utils.shell import CommandResult, command_exists, run_command, run_noninteractive

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_state_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_noninteractive",
]
