"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

import typer
from pydantic import ValidationError

from aptresolve.core.config import ConfigError, load_config_or_default
from aptresolve.core.errors import AptResolveError
from aptresolve.core.provider import AptPackageProvider
from aptresolve.models.resource import PackageResource
from aptresolve.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def build_resource(
    names: list[str],
    versions: list[str] | None = None,
    default_release: str | None = None,
    options: str | None = None,
    timeout: float | None = None,
    response_file: Path | None = None,
) -> tuple[PackageResource, bool]:
    """Build a package resource from CLI arguments and the config file.

    A single name becomes a scalar request, several names a list request.
    CLI values override config values.

    Args:
        names: Package names from the command line.
        versions: Versions from the command line, one per package.
        default_release: Release pin override.
        options: apt-get options override.
        timeout: Timeout override in seconds.
        response_file: debconf selections file.

    Returns:
        Tuple of (resource, use_sudo).

    Raises:
        ConfigError: If the config file is invalid.
        ValueError: If the arguments do not form a valid resource.
    """
    config = load_config_or_default()

    package_name: str | list[str] = names[0] if len(names) == 1 else list(names)
    version: str | list[str] | None = None
    if versions:
        version = versions[0] if len(names) == 1 and len(versions) == 1 else list(versions)

    resource = PackageResource(
        package_name=package_name,
        version=version,
        default_release=default_release or config.default_release,
        options=options or config.options,
        timeout=timeout or config.timeout_seconds,
        response_file=response_file,
    )
    return resource, config.use_sudo


def build_provider(
    names: list[str],
    versions: list[str] | None = None,
    default_release: str | None = None,
    options: str | None = None,
    timeout: float | None = None,
    response_file: Path | None = None,
    dry_run: bool = False,
) -> AptPackageProvider:
    """Build an apt provider for the given CLI arguments.

    See :func:`build_resource` for argument handling.
    """
    resource, use_sudo = build_resource(
        names,
        versions=versions,
        default_release=default_release,
        options=options,
        timeout=timeout,
        response_file=response_file,
    )
    return AptPackageProvider(resource, dry_run=dry_run, use_sudo=use_sudo)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report known errors on stderr and exit with code 1."""
    try:
        yield
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        print_error(f"Invalid request: {messages}")
        raise typer.Exit(code=1) from e
    except (AptResolveError, ConfigError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
