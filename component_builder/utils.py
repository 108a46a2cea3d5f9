"""Shared utility functions for Component Builder.

Provides name helpers, size formatting and Rich-based console reporting.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def capitalize_first(value: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Examples::

        capitalize_first("navbar") -> "Navbar"
        capitalize_first("hero")   -> "Hero"
    """
    if not value:
        return ""
    return value[0].upper() + value[1:]


def to_pascal(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", name)
    return "".join(word.capitalize() for word in parts if word)


def slugify(text: str) -> str:
    """Convert text to a URL/filename-safe slug (hyphenated)."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower().strip())
    return slug.strip("-")


DEFAULT_PACKAGE_NAME = "your-website"


def package_name(title: str) -> str:
    """Slugify *title* into an npm package name.

    Titles without any letters or digits fall back to ``your-website``.
    """
    return slugify(title) or DEFAULT_PACKAGE_NAME


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_size(num_bytes: int) -> str:
    """Format a byte count to a human-readable string.

    Examples::

        format_size(512)     -> "512 B"
        format_size(2048)    -> "2.0 KB"
        format_size(3145728) -> "3.0 MB"
    """
    if num_bytes < 1024:
        return f"{max(num_bytes, 0)} B"
    size = float(num_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if size < 1024 or unit == "GB":
            return f"{size:.1f} {unit}"
    return f"{size:.1f} GB"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
