"""Data models for aptresolve.

This module exports the core data structures used throughout the application.
"""

from aptresolve.models.action import ActionType
from aptresolve.models.package import PackageVersionState, ResolvedPackages
from aptresolve.models.resource import CurrentResource, PackageResource

__all__ = [
    "ActionType",
    "CurrentResource",
    "PackageResource",
    "PackageVersionState",
    "ResolvedPackages",
]
