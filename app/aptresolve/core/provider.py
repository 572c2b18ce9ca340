"""APT package provider.

Binds a requested :class:`PackageResource` to a state resolver and an
operator. The provider loads the current state of the requested
packages and applies actions using that state. Deciding *whether* an
action is needed is left to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aptresolve.core.errors import NoCandidateVersionError, UnsupportedAttributeError
from aptresolve.models.action import ActionType
from aptresolve.models.resource import CurrentResource, PackageResource
from aptresolve.operators.apt import AptOperator
from aptresolve.scanners.apt import AptStateResolver

if TYPE_CHECKING:
    from aptresolve.models.package import ResolvedPackages
    from aptresolve.operators.base import Operator
    from aptresolve.scanners.base import StateResolver
    from aptresolve.utils.shell import CommandResult

logger = logging.getLogger(__name__)


class AptPackageProvider:
    """Resolves and acts on an apt package resource.

    Attributes:
        resource: The requested resource.
        resolver: Resolver used to load current state.
        operator: Operator used to apply actions.
        current_resource: Current state, set by :meth:`load_current_resource`.
        resolved: Resolution result, set by :meth:`load_current_resource`.

    Example:
        >>> provider = AptPackageProvider(PackageResource(package_name=["vim", "mta"]))
        >>> provider.load_current_resource().version
        ['2:9.0.1378-2', None]
        >>> provider.run_action(ActionType.INSTALL)
    """

    def __init__(
        self,
        resource: PackageResource,
        resolver: StateResolver | None = None,
        operator: Operator | None = None,
        dry_run: bool = False,
        use_sudo: bool = False,
    ) -> None:
        self.resource = resource
        self.resolver: StateResolver = resolver or AptStateResolver(
            default_release=resource.default_release,
            timeout=resource.timeout,
        )
        self.operator: Operator = operator or AptOperator(
            dry_run=dry_run,
            default_release=resource.default_release,
            options=resource.options,
            timeout=resource.timeout,
            use_sudo=use_sudo,
        )
        self.current_resource: CurrentResource | None = None
        self.resolved: ResolvedPackages | None = None

    def define_resource_requirements(self) -> None:
        """Validate the resource before any command runs.

        Raises:
            UnsupportedAttributeError: If the resource sets a source file.
        """
        if self.resource.source:
            msg = "apt package provider cannot handle source attribute. Use dpkg provider instead"
            raise UnsupportedAttributeError(msg)

    def load_current_resource(self) -> CurrentResource:
        """Resolve the current state of the requested packages.

        Returns:
            CurrentResource carrying the installed version(s), scalar or
            list matching the request.

        Raises:
            UnsupportedAttributeError: If the resource sets a source file.
            AmbiguousVirtualPackageError: If a virtual name has several providers.
            CommandError: If an apt-cache call fails or times out.
            PackageManagerUnavailableError: If apt-cache is not installed.
        """
        self.define_resource_requirements()
        request = self.resource.names if self.resource.is_multi else self.resource.names[0]
        self.resolved = self.resolver.check_all_packages_state(request)
        self.current_resource = CurrentResource(
            package_name=self.resource.package_name,
            version=self.resolved.installed_version,
        )
        return self.current_resource

    @property
    def candidate_version(self) -> str | None | list[str | None]:
        """Candidate version(s) from the last resolution."""
        return self.require_resolved().candidate_version

    @property
    def virtual_packages(self) -> dict[str, bool]:
        """Virtual package mapping from the last resolution."""
        return self.require_resolved().virtual_packages

    def target_versions(self) -> list[str | None]:
        """Versions to pin for install and upgrade.

        Requested versions win; otherwise the candidate version is used.
        Virtual packages are never pinned so they may have no version.

        Returns:
            Versions positionally matching the requested names.

        Raises:
            NoCandidateVersionError: If a concrete package has no version.
        """
        resolved = self.require_resolved()
        targets: list[str | None] = []
        for state, requested in zip(resolved.states, self.resource.versions, strict=True):
            version = requested or state.candidate_version
            if version is None and not state.is_virtual:
                raise NoCandidateVersionError(state.name)
            targets.append(version)
        return targets

    def run_action(self, action: ActionType) -> list[CommandResult]:
        """Apply an action to the requested packages.

        State is loaded first if it has not been loaded yet.
        Reconfigure only touches packages that are installed.

        Args:
            action: Action to apply.

        Returns:
            CommandResults of the executed commands.
        """
        if self.resolved is None:
            self.load_current_resource()

        names = self.resource.names
        results: list[CommandResult] = []

        if action.pins_versions:
            versions = self.target_versions()
            results.extend(self._preseed())
            results.extend(self.operator.apply(action, names, versions, self.virtual_packages))
        elif action is ActionType.RECONFIG:
            installed = [state.name for state in self.require_resolved() if state.is_installed]
            for name in names:
                if name not in installed:
                    logger.info("%s not installed, can't reconfigure", name)
            if not installed:
                return results
            if self.resource.response_file is None:
                logger.info(
                    "No response_file provided for %s - nothing to do", ", ".join(installed)
                )
                return results
            results.extend(self._preseed())
            results.extend(self.operator.apply(action, installed))
        else:
            results.extend(self.operator.apply(action, names))

        return results

    def _preseed(self) -> list[CommandResult]:
        if self.resource.response_file is None:
            return []
        result = self.operator.preseed(self.resource.response_file)
        return [result] if result is not None else []

    def require_resolved(self) -> ResolvedPackages:
        """Return the last resolution.

        Raises:
            RuntimeError: If load_current_resource() has not been called.
        """
        if self.resolved is None:
            msg = "load_current_resource() must be called first"
            raise RuntimeError(msg)
        return self.resolved
