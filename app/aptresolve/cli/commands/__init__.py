"""CLI commands for aptresolve.

This package contains all subcommand implementations.
"""

from aptresolve.cli.commands import config, package, state

__all__ = ["config", "package", "state"]
