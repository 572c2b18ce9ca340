"""Package state models.

This module defines the records produced by package state resolution:
the per-package version state and the ordered result of a bulk request.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PackageVersionState:
    """Resolved state of a single requested package.

    The state is always reported under the requested name. For a virtual
    package the versions are those of the concrete provider.

    Attributes:
        name: Requested package name.
        installed_version: Installed version, None if not installed.
        candidate_version: Version apt would install, None if none is available.
        is_virtual: Whether the requested name resolved through a provider.
        provider: Concrete provider package when virtual, otherwise None.
    """

    name: str
    installed_version: str | None = field(default=None)
    candidate_version: str | None = field(default=None)
    is_virtual: bool = field(default=False)
    provider: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate state data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if self.is_virtual and not self.provider:
            msg = f"Virtual package {self.name} requires a provider"
            raise ValueError(msg)

    @property
    def is_installed(self) -> bool:
        """Check if the package (or its provider) is installed."""
        return self.installed_version is not None


@dataclass(frozen=True, slots=True)
class ResolvedPackages:
    """Ordered result of resolving one or more requested packages.

    Index ``i`` of every sequence corresponds to the requested name at
    index ``i``. A scalar request reports scalar versions so callers can
    compare scalar against scalar and list against list.

    Attributes:
        states: Per-package states in request order.
        multi: Whether the request was a sequence of names.
    """

    states: tuple[PackageVersionState, ...]
    multi: bool = False

    def __post_init__(self) -> None:
        """Validate that a scalar result holds exactly one state."""
        if not self.multi and len(self.states) != 1:
            msg = f"A scalar result must hold exactly one state, got {len(self.states)}"
            raise ValueError(msg)

    @property
    def names(self) -> list[str]:
        """Requested names in order."""
        return [state.name for state in self.states]

    @property
    def installed_version(self) -> str | None | list[str | None]:
        """Installed version(s), scalar or positional list."""
        versions = [state.installed_version for state in self.states]
        return versions if self.multi else versions[0]

    @property
    def candidate_version(self) -> str | None | list[str | None]:
        """Candidate version(s), scalar or positional list."""
        versions = [state.candidate_version for state in self.states]
        return versions if self.multi else versions[0]

    @property
    def virtual_packages(self) -> dict[str, bool]:
        """Mapping of requested name to whether it resolved as virtual."""
        return {state.name: state.is_virtual for state in self.states}

    def __iter__(self) -> Iterator[PackageVersionState]:
        return iter(self.states)

    def __len__(self) -> int:
        return len(self.states)
