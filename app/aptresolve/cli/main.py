"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from aptresolve import __version__
from aptresolve.cli.commands import config, package, state
from aptresolve.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="aptresolve",
    help="Resolve Debian package state and act on it.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"aptresolve version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log ERROR and above. Ignored when verbose is set.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output (log every apt command).",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """aptresolve - resolve Debian package state and act on it.

    Resolves virtual package names to their provider, reports installed
    and candidate versions, and runs apt-get actions in one batch.
    """
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command("state")(state.show_state)
app.command("install")(package.install)
app.command("upgrade")(package.upgrade)
app.command("remove")(package.remove)
app.command("purge")(package.purge)
app.command("reconfigure")(package.reconfigure)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
