"""Command-line interface for aptresolve."""

from aptresolve.cli.main import app

__all__ = ["app"]
