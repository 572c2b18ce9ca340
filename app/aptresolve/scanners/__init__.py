"""Package state resolvers.

This module provides the abstract resolver interface and the APT
implementation.
"""

from aptresolve.scanners.apt import AptStateResolver
from aptresolve.scanners.base import StateResolver

__all__ = ["AptStateResolver", "StateResolver"]
