"""Configuration commands.

Show the effective configuration and write a config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from aptresolve.core.config import (
    AptConfig,
    ConfigError,
    load_config_or_default,
    save_config,
)
from aptresolve.core.paths import get_config_path
from aptresolve.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and initialize aptresolve configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)

ConfigPathOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file path (default: XDG config dir)."),
]


@app.command()
def show(config_path: ConfigPathOpt = None) -> None:
    """Show the effective configuration."""
    path = config_path or get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(title=f"Configuration ({path})", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in config.model_dump().items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)

    if not path.exists():
        console.print("\n[muted]No config file found, showing defaults.[/]")


@app.command()
def init(
    config_path: ConfigPathOpt = None,
    default_release: Annotated[
        str | None,
        typer.Option("--default-release", "-t", help="Default release pin."),
    ] = None,
    options: Annotated[
        str | None,
        typer.Option("--options", "-o", help="Extra apt-get options."),
    ] = None,
    timeout: Annotated[
        int,
        typer.Option("--timeout", help="Subprocess timeout in seconds.", min=1, max=7200),
    ] = 900,
    use_sudo: Annotated[
        bool,
        typer.Option("--sudo/--no-sudo", help="Run package actions through sudo."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    config = AptConfig(
        default_release=default_release,
        options=options,
        timeout_seconds=timeout,
        use_sudo=use_sudo,
    )
    try:
        saved = save_config(config, path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
