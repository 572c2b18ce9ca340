"""APT package state resolver.

Queries installed and candidate versions with ``apt-cache policy`` and
maps virtual package names to their single provider with
``apt-cache showpkg``.
"""

import logging

from aptresolve.core.errors import AmbiguousVirtualPackageError
from aptresolve.models.package import PackageVersionState
from aptresolve.scanners.base import StateResolver
from aptresolve.scanners.reports import parse_policy_output, parse_reverse_provides
from aptresolve.utils.shell import command_exists, run_noninteractive

logger = logging.getLogger(__name__)


def default_release_options(default_release: str | None) -> str | None:
    """Build the apt option pinning the default release.

    Args:
        default_release: Release name, or None for no pin.

    Returns:
        ``-o APT::Default-Release=<release>``, or None.
    """
    if default_release:
        return f"-o APT::Default-Release={default_release}"
    return None


class AptStateResolver(StateResolver):
    """State resolver for APT packages.

    Attributes:
        default_release: Release passed to ``apt-cache policy`` as a pin.
        timeout: Timeout for each apt-cache call in seconds.
    """

    tool = "apt-cache"

    def __init__(self, default_release: str | None = None, timeout: float = 900.0) -> None:
        self.default_release = default_release
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if apt-cache is available."""
        return command_exists("apt-cache")

    def query_versions(self, name: str) -> tuple[str | None, str | None]:
        """Query installed and candidate versions of one concrete package.

        A package apt does not know yields (None, None).

        Args:
            name: Package name.

        Returns:
            Tuple of (installed_version, candidate_version).
        """
        result = run_noninteractive(
            "apt-cache",
            default_release_options(self.default_release),
            "policy",
            [name],
            timeout=self.timeout,
        )
        installed, candidate = parse_policy_output(result.stdout)
        logger.debug("Installed version for %s is %s", name, installed)
        logger.debug("Candidate version for %s is %s", name, candidate)
        return installed, candidate

    def resolve_virtual(self, name: str) -> str | None:
        """Find the single real package providing a virtual package.

        Args:
            name: Package name whose candidate version was not found.

        Returns:
            Name of the provider, or None if the name is not virtual
            (or not known at all).

        Raises:
            AmbiguousVirtualPackageError: If several packages provide the name.
        """
        result = run_noninteractive("apt-cache", "showpkg", [name], timeout=self.timeout)
        providers = parse_reverse_provides(result.stdout)
        if not providers:
            return None
        if len(providers) > 1:
            raise AmbiguousVirtualPackageError(name, list(providers))
        return next(iter(providers))

    def check_package_state(self, name: str) -> PackageVersionState:
        """Resolve installed and candidate versions, following virtual packages.

        When no candidate exists the name is tried as a virtual package. A
        unique provider's versions are reported under the requested name.

        Args:
            name: Requested package name.

        Returns:
            PackageVersionState for the requested name.

        Raises:
            AmbiguousVirtualPackageError: If several packages provide the name.
        """
        installed, candidate = self.query_versions(name)

        if candidate is None:
            provider = self.resolve_virtual(name)
            if provider:
                logger.info(
                    "%s is a virtual package, actually acting on package[%s]",
                    name,
                    provider,
                )
                installed, candidate = self.query_versions(provider)
                return PackageVersionState(
                    name=name,
                    installed_version=installed,
                    candidate_version=candidate,
                    is_virtual=True,
                    provider=provider,
                )

        return PackageVersionState(
            name=name,
            installed_version=installed,
            candidate_version=candidate,
        )
