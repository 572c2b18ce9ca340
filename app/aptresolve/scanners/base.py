"""Abstract base class for package state resolvers.

This module defines the StateResolver interface that the resource layer
depends on to learn the current state of requested packages.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from aptresolve.core.errors import PackageManagerUnavailableError
from aptresolve.models.package import PackageVersionState, ResolvedPackages


class StateResolver(ABC):
    """Abstract base class for package state resolvers.

    Resolvers query a package manager for installed and candidate
    versions of requested packages.

    Attributes:
        tool: Command this resolver runs, named when it is missing.

    Example:
        >>> resolver = AptStateResolver()
        >>> resolved = resolver.check_all_packages_state(["vim", "mail-transport-agent"])
        >>> resolved.candidate_version
        ['2:9.0.1378-2', '3.7.10-0+deb12u1']
    """

    tool: str = "package manager"

    @abstractmethod
    def check_package_state(self, name: str) -> PackageVersionState:
        """Resolve the state of a single package.

        Args:
            name: Requested package name.

        Returns:
            PackageVersionState reported under the requested name.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    def check_all_packages_state(self, names: str | Sequence[str]) -> ResolvedPackages:
        """Resolve the state of one or more packages in request order.

        Packages are resolved strictly in sequence. The first failure aborts
        the remaining names.

        Args:
            names: A single package name or an ordered sequence of names.

        Returns:
            ResolvedPackages, scalar for a single name and positional for
            a sequence.

        Raises:
            PackageManagerUnavailableError: If the package manager is missing.
        """
        if not self.is_available():
            raise PackageManagerUnavailableError(self.tool)

        if isinstance(names, str):
            return ResolvedPackages(states=(self.check_package_state(names),), multi=False)
        states = tuple(self.check_package_state(name) for name in names)
        return ResolvedPackages(states=states, multi=True)
