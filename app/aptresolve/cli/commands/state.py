"""State command implementation.

Shows installed and candidate versions of requested packages,
following virtual packages to their provider.
"""

import json
from dataclasses import asdict
from typing import Annotated

import typer

from aptresolve.cli.types import OutputFormat, build_provider, exit_on_error
from aptresolve.models.package import ResolvedPackages
from aptresolve.utils.formatting import console, create_state_table, format_state_row


def show_state(
    names: Annotated[
        list[str],
        typer.Argument(help="Package names (virtual names are resolved)."),
    ],
    default_release: Annotated[
        str | None,
        typer.Option(
            "--default-release",
            "-t",
            help="Pin queries to this release.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Resolve and display the state of one or more packages.

    Examples:
        aptresolve state vim                       # Single package
        aptresolve state vim mail-transport-agent  # Virtual names resolve to their provider
        aptresolve state vim --format json         # Output as JSON
        aptresolve state vim -t bookworm-backports # Pin to a release
    """
    with exit_on_error():
        provider = build_provider(names, default_release=default_release)
        provider.load_current_resource()
        resolved = provider.require_resolved()

    if output_format == OutputFormat.JSON:
        _print_json(resolved)
        return

    _print_table(resolved)


def _print_table(resolved: ResolvedPackages) -> None:
    """Display resolved states as a Rich table."""
    table = create_state_table()
    for state in resolved:
        table.add_row(*format_state_row(state))
    console.print(table)

    virtual_count = sum(1 for state in resolved if state.is_virtual)
    if virtual_count:
        console.print(f"\n[muted]{virtual_count} virtual package(s) resolved to a provider[/]")


def _print_json(resolved: ResolvedPackages) -> None:
    """Print resolved states as JSON."""
    data = [asdict(state) for state in resolved]
    console.print_json(json.dumps(data))
