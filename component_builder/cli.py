"""Command-line entry point.

Usage::

    component-builder --list
    component-builder navbar-simple hero-split footer-simple --format nextjs
    python -m component_builder hero-simple --format astro -o ./dist --key-by id
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from component_builder.catalog import Catalog, CatalogError, UnknownSnippetError, default_catalog
from component_builder.config import FORMAT_ALIASES, Config, ExportFormat, FileKey
from component_builder.exporter import ExportService
from component_builder.selection import Selection
from component_builder.utils import console, print_summary_table

_FORMAT_CHOICES = [f.value for f in ExportFormat] + sorted(FORMAT_ALIASES)


def print_catalog(catalog: Catalog) -> None:
    """Print every catalog entry as a Rich table."""
    table = Table(title="Component catalog", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Category", style="dim")
    table.add_column("Title")
    table.add_column("Description")
    for snippet in catalog:
        table.add_row(snippet.id, snippet.category.value, snippet.title, snippet.description)
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="component-builder",
        description="Component Builder -- export catalog snippets as a runnable website project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  component-builder --list\n"
            "  component-builder navbar-simple hero-split footer-simple --format nextjs\n"
            "  component-builder hero-simple contact-simple -f astro -o ./dist --key-by id\n"
        ),
    )
    parser.add_argument(
        "snippets",
        nargs="*",
        metavar="SNIPPET_ID",
        help="Catalog ids in page order",
    )
    parser.add_argument(
        "--format", "-f",
        default=None,
        choices=_FORMAT_CHOICES,
        help="Output project shape (default: static, or $CB_FORMAT)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the archive is saved to (default: ./output, or $CB_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--key-by",
        default=None,
        choices=[k.value for k in FileKey],
        help="Name component files by snippet category (default) or id",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Site title written into the generated project",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the catalog and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``component-builder``."""
    args = build_parser().parse_args(argv)

    try:
        catalog = default_catalog()
    except CatalogError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    if args.list:
        print_catalog(catalog)
        return

    try:
        config = Config.from_env()
    except ValueError as exc:
        console.print(
            f"[bold red]Error:[/bold red] Invalid environment configuration: {escape(str(exc))}"
        )
        sys.exit(1)
    if args.output:
        config.output_dir = Path(args.output)
    if args.key_by:
        config.key_by = FileKey(args.key_by)
    if args.title:
        config.project_title = args.title
    export_format = ExportFormat.parse(args.format) if args.format else config.default_format

    try:
        selection = Selection(catalog.resolve(args.snippets))
    except UnknownSnippetError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        console.print("Run [bold]component-builder --list[/bold] to see available ids.")
        sys.exit(1)

    print_summary_table(
        {
            "Format": export_format.value,
            "Snippets": ", ".join(s.id for s in selection) or "(none)",
            "Key by": config.key_by.value,
            "Output": str(config.output_dir),
        },
        title="Export",
    )

    service = ExportService(config)
    ok = asyncio.run(service.export(selection.to_context(export_format, config.key_by)))
    if not ok:
        console.print("[bold red]Export failed.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
