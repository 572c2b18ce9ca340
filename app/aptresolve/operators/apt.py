"""APT package operator implementation.

Executes package actions using apt-get, debconf-set-selections and
dpkg-reconfigure.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from aptresolve.operators.base import Operator
from aptresolve.scanners.apt import default_release_options
from aptresolve.utils.shell import (
    NONINTERACTIVE_ENV,
    CommandResult,
    command_exists,
    run_noninteractive,
)

logger = logging.getLogger(__name__)


def build_package_tokens(
    names: Sequence[str],
    versions: Sequence[str | None],
    virtual: Mapping[str, bool],
) -> list[str]:
    """Build apt-get install arguments for packages at pinned versions.

    Virtual names are passed bare since a virtual name has no version of its
    own. A missing version also leaves the name unpinned.

    Args:
        names: Package names in request order.
        versions: Versions positionally matching names.
        virtual: Mapping of requested name to whether it is virtual.

    Returns:
        One ``name`` or ``name=version`` token per package.

    Raises:
        ValueError: If names and versions differ in length.
    """
    if len(names) != len(versions):
        msg = f"Got {len(versions)} versions for {len(names)} packages"
        raise ValueError(msg)

    tokens: list[str] = []
    for name, version in zip(names, versions, strict=True):
        if virtual.get(name, False) or version is None:
            tokens.append(name)
        else:
            tokens.append(f"{name}={version}")
    return tokens


class AptOperator(Operator):
    """Operator for APT/dpkg packages.

    Attributes:
        dry_run: If True, uses apt-get --dry-run and skips debconf/dpkg calls.
        default_release: Release pin applied to installs and upgrades.
        options: Extra apt-get options, as a shell-quoted string.
        timeout: Timeout for each command in seconds.
        use_sudo: Prefix commands with sudo.
    """

    tool = "apt-get"
    _APT_GET = "apt-get -q -y"

    def __init__(
        self,
        dry_run: bool = False,
        default_release: str | None = None,
        options: str | None = None,
        timeout: float = 900.0,
        use_sudo: bool = False,
    ) -> None:
        super().__init__(dry_run=dry_run)
        self.default_release = default_release
        self.options = options
        self.timeout = timeout
        self.use_sudo = use_sudo

    def is_available(self) -> bool:
        """Check if apt-get is available."""
        return command_exists("apt-get")

    def install(
        self,
        names: Sequence[str],
        versions: Sequence[str | None],
        virtual: Mapping[str, bool],
    ) -> CommandResult:
        """Install packages in one apt-get call.

        Args:
            names: Package names in request order.
            versions: Versions positionally matching names.
            virtual: Mapping of requested name to whether it is virtual.

        Returns:
            CommandResult of the apt-get call.
        """
        tokens = build_package_tokens(names, versions, virtual)
        logger.info("Installing %s", " ".join(tokens))
        return self._run(
            self._APT_GET,
            self._dry_run_flag(),
            default_release_options(self.default_release),
            self.options,
            "install",
            tokens,
        )

    def upgrade(
        self,
        names: Sequence[str],
        versions: Sequence[str | None],
        virtual: Mapping[str, bool],
    ) -> CommandResult:
        """Upgrade packages; apt treats this exactly like a pinned install."""
        return self.install(names, versions, virtual)

    def remove(self, names: Sequence[str]) -> CommandResult:
        """Remove packages in one apt-get call."""
        logger.info("Removing %s", " ".join(names))
        return self._run(self._APT_GET, self._dry_run_flag(), self.options, "remove", list(names))

    def purge(self, names: Sequence[str]) -> CommandResult:
        """Purge packages in one apt-get call."""
        logger.info("Purging %s", " ".join(names))
        return self._run(self._APT_GET, self._dry_run_flag(), self.options, "purge", list(names))

    def preseed(self, response_file: Path) -> CommandResult | None:
        """Load debconf selections from a response file."""
        logger.info("Pre-seeding package installation instructions from %s", response_file)
        if self.dry_run:
            return None
        return self._run("debconf-set-selections", [str(response_file)])

    def reconfigure(self, name: str) -> CommandResult | None:
        """Run dpkg-reconfigure for one package."""
        logger.info("Reconfiguring %s", name)
        if self.dry_run:
            return None
        return self._run("dpkg-reconfigure", [name])

    def _dry_run_flag(self) -> str | None:
        return "--dry-run" if self.dry_run else None

    def _sudo_prefix(self) -> list[str] | None:
        if not self.use_sudo:
            return None
        # sudo resets the environment, so the variables go through env(1)
        return ["sudo", "env", *(f"{key}={value}" for key, value in NONINTERACTIVE_ENV.items())]

    def _run(self, *args: str | list[str] | None) -> CommandResult:
        """Run a command non-interactively, through sudo if configured."""
        return run_noninteractive(self._sudo_prefix(), *args, timeout=self.timeout)
