"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from aptresolve.models.package import PackageVersionState

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "virtual": "#d44ebc",
        "installed": "#69B9A1",
        "missing": "#226666",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_state_table(title: str = "Package State") -> Table:
    """Create a pre-configured table for displaying resolved package state.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for package state display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Installed", style="muted")
    table.add_column("Candidate", style="info")
    table.add_column("Provided by", style="virtual")
    return table


def format_state_row(state: PackageVersionState) -> tuple[str, str, str, str]:
    """Format a package state as a table row with Rich markup.

    Args:
        state: The resolved package state.

    Returns:
        Tuple of (name, installed, candidate, provider).
    """
    style = "installed" if state.is_installed else "missing"
    name = f"[{style}]{state.name}[/]"
    installed = state.installed_version or "[muted](none)[/]"
    candidate = state.candidate_version or "[muted](none)[/]"
    provider = state.provider if state.is_virtual and state.provider else "-"
    return (name, installed, candidate, provider)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
