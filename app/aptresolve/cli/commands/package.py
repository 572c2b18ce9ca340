"""Package action commands.

Install, upgrade, remove, purge and reconfigure packages after
resolving their state.
"""

from pathlib import Path
from typing import Annotated

import typer

from aptresolve.cli.types import build_provider, exit_on_error
from aptresolve.models.action import ActionType
from aptresolve.utils.formatting import print_info, print_success

# Shared option declarations
NamesArg = Annotated[list[str], typer.Argument(help="Package names.")]
VersionsOpt = Annotated[
    list[str] | None,
    typer.Option(
        "--package-version",
        "-p",
        help="Version to pin, once per package in the same order (default: candidate).",
    ),
]
ReleaseOpt = Annotated[
    str | None,
    typer.Option("--default-release", "-t", help="Pin apt to this release."),
]
OptionsOpt = Annotated[
    str | None,
    typer.Option("--options", "-o", help="Extra apt-get options, e.g. '--no-install-recommends'."),
]
ResponseFileOpt = Annotated[
    Path | None,
    typer.Option(
        "--response-file",
        "-r",
        help="debconf selections file to preseed before acting.",
        exists=True,
        dir_okay=False,
    ),
]
TimeoutOpt = Annotated[
    float | None,
    typer.Option("--timeout", help="Timeout in seconds for each command."),
]
DryRunOpt = Annotated[
    bool,
    typer.Option("--dry-run", "-n", help="Simulate the action with apt-get --dry-run."),
]


def _run(
    action: ActionType,
    names: list[str],
    versions: list[str] | None = None,
    default_release: str | None = None,
    options: str | None = None,
    response_file: Path | None = None,
    timeout: float | None = None,
    dry_run: bool = False,
) -> None:
    """Resolve package state and apply an action."""
    with exit_on_error():
        provider = build_provider(
            names,
            versions=versions,
            default_release=default_release,
            options=options,
            timeout=timeout,
            response_file=response_file,
            dry_run=dry_run,
        )
        provider.load_current_resource()

        for name, is_virtual in provider.virtual_packages.items():
            if is_virtual:
                print_info(f"{name} is a virtual package")

        results = provider.run_action(action)

    if not results:
        print_info("Nothing to do.")
        return

    if dry_run:
        for result in results:
            if result.stdout.strip():
                typer.echo(result.stdout.rstrip())
        print_success(f"Dry-run {action.value} completed for {', '.join(names)}")
        return

    print_success(f"{action.value.capitalize()} completed for {', '.join(names)}")


def install(
    names: NamesArg,
    versions: VersionsOpt = None,
    default_release: ReleaseOpt = None,
    options: OptionsOpt = None,
    response_file: ResponseFileOpt = None,
    timeout: TimeoutOpt = None,
    dry_run: DryRunOpt = False,
) -> None:
    """Install packages at their candidate (or requested) versions.

    Examples:
        aptresolve install vim                        # Install candidate version
        aptresolve install vim curl -p 2:9.0 -p 7.88  # Pin versions in order
        aptresolve install mail-transport-agent       # Virtual name, installed unpinned
    """
    _run(
        ActionType.INSTALL,
        names,
        versions,
        default_release,
        options,
        response_file,
        timeout,
        dry_run,
    )


def upgrade(
    names: NamesArg,
    versions: VersionsOpt = None,
    default_release: ReleaseOpt = None,
    options: OptionsOpt = None,
    response_file: ResponseFileOpt = None,
    timeout: TimeoutOpt = None,
    dry_run: DryRunOpt = False,
) -> None:
    """Upgrade packages to their candidate (or requested) versions."""
    _run(
        ActionType.UPGRADE,
        names,
        versions,
        default_release,
        options,
        response_file,
        timeout,
        dry_run,
    )


def remove(
    names: NamesArg,
    options: OptionsOpt = None,
    timeout: TimeoutOpt = None,
    dry_run: DryRunOpt = False,
) -> None:
    """Remove packages, keeping configuration files."""
    _run(ActionType.REMOVE, names, options=options, timeout=timeout, dry_run=dry_run)


def purge(
    names: NamesArg,
    options: OptionsOpt = None,
    timeout: TimeoutOpt = None,
    dry_run: DryRunOpt = False,
) -> None:
    """Remove packages together with their configuration files."""
    _run(ActionType.PURGE, names, options=options, timeout=timeout, dry_run=dry_run)


def reconfigure(
    names: NamesArg,
    response_file: ResponseFileOpt = None,
    timeout: TimeoutOpt = None,
    dry_run: DryRunOpt = False,
) -> None:
    """Preseed debconf answers from a response file and reconfigure packages."""
    _run(
        ActionType.RECONFIG,
        names,
        response_file=response_file,
        timeout=timeout,
        dry_run=dry_run,
    )
