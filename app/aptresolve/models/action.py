"""Action models for package operations."""

from enum import Enum


class ActionType(str, Enum):
    """Type of package management action.

    Attributes:
        INSTALL: Install packages at pinned versions.
        UPGRADE: Upgrade packages to pinned versions (same apt operation as install).
        REMOVE: Remove packages but keep configuration files.
        PURGE: Remove packages including configuration files.
        RECONFIG: Re-seed debconf answers and reconfigure packages.
    """

    INSTALL = "install"
    UPGRADE = "upgrade"
    REMOVE = "remove"
    PURGE = "purge"
    RECONFIG = "reconfig"

    @property
    def pins_versions(self) -> bool:
        """Check if this action installs specific versions."""
        return self in (ActionType.INSTALL, ActionType.UPGRADE)
