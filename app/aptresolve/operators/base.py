"""Abstract base class for package operators.

This module defines the Operator interface that the resource layer uses
to apply package management actions.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from aptresolve.core.errors import PackageManagerUnavailableError
from aptresolve.models.action import ActionType
from aptresolve.utils.shell import CommandResult


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators execute package management actions (install, upgrade,
    remove, purge, preseed, reconfigure) for a specific package manager.
    Each action is a single batched command; failures propagate.

    Attributes:
        tool: Command this operator runs, named when it is missing.
        dry_run: If True, only simulate actions without executing them.

    Example:
        >>> operator = AptOperator(dry_run=True)
        >>> operator.install(["vim", "mail-transport-agent"], ["2:9.0", None],
        ...                  {"vim": False, "mail-transport-agent": True})
    """

    tool: str = "package manager"

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate actions without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @abstractmethod
    def install(
        self,
        names: Sequence[str],
        versions: Sequence[str | None],
        virtual: Mapping[str, bool],
    ) -> CommandResult:
        """Install packages at the given versions.

        Args:
            names: Package names in request order.
            versions: Versions positionally matching names.
            virtual: Mapping of requested name to whether it is virtual.

        Returns:
            CommandResult of the batched command.
        """

    @abstractmethod
    def upgrade(
        self,
        names: Sequence[str],
        versions: Sequence[str | None],
        virtual: Mapping[str, bool],
    ) -> CommandResult:
        """Upgrade packages to the given versions."""

    @abstractmethod
    def remove(self, names: Sequence[str]) -> CommandResult:
        """Remove packages, keeping their configuration files."""

    @abstractmethod
    def purge(self, names: Sequence[str]) -> CommandResult:
        """Remove packages together with their configuration files."""

    @abstractmethod
    def preseed(self, response_file: Path) -> CommandResult | None:
        """Feed a selections file to the configuration database.

        Returns:
            CommandResult, or None when skipped in dry-run mode.
        """

    @abstractmethod
    def reconfigure(self, name: str) -> CommandResult | None:
        """Reconfigure an installed package.

        Returns:
            CommandResult, or None when skipped in dry-run mode.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    def apply(
        self,
        action: ActionType,
        names: Sequence[str],
        versions: Sequence[str | None] | None = None,
        virtual: Mapping[str, bool] | None = None,
    ) -> list[CommandResult]:
        """Apply an action to packages.

        Convenience dispatcher over the individual action methods.
        Reconfigure runs once per package; all other actions are one
        batched call.

        Args:
            action: Action to apply.
            names: Package names in request order.
            versions: Versions for install/upgrade, positionally matching names.
            virtual: Virtual package mapping for install/upgrade.

        Returns:
            List of CommandResult for the executed commands.

        Raises:
            PackageManagerUnavailableError: If the package manager is missing.
            ValueError: If install/upgrade is requested without versions.
        """
        if not self.is_available():
            raise PackageManagerUnavailableError(self.tool)

        if action.pins_versions:
            if versions is None:
                msg = f"{action.value} requires versions"
                raise ValueError(msg)
            method = self.install if action is ActionType.INSTALL else self.upgrade
            return [method(names, versions, virtual or {})]

        if action is ActionType.REMOVE:
            return [self.remove(names)]

        if action is ActionType.PURGE:
            return [self.purge(names)]

        results: list[CommandResult] = []
        for name in names:
            result = self.reconfigure(name)
            if result is not None:
                results.append(result)
        return results
