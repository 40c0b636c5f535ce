"""Shared CLI helpers: catalog source options and output formatters."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from toolbridge.catalog.errors import ConfigurationError
from toolbridge.catalog.loader import CatalogLoader, parse_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from toolbridge.catalog.catalog import ToolCatalog

console = Console()
err_console = Console(stderr=True)


def catalog_source(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the ``CONFIG`` argument and ``--tools-json`` option to a command."""
    func = click.option(
        "--tools-json",
        default=None,
        envvar="TOOLBRIDGE_TOOLS_JSON",
        help="Tool declarations as an inline JSON document.",
    )(func)
    func = click.argument(
        "config",
        required=False,
        envvar="TOOLBRIDGE_CONFIG",
        type=click.Path(exists=True, dir_okay=False),
    )(func)
    return func


def load_catalog(config: str | None, tools_json: str | None) -> ToolCatalog:
    """Build the catalog from exactly one configuration source, or exit 1."""
    if (config is None) == (tools_json is None):
        raise click.UsageError("Provide exactly one of CONFIG or --tools-json.")
    try:
        if tools_json is not None:
            return parse_catalog(tools_json, format="json")
        return CatalogLoader(Path(config)).load()  # type: ignore[arg-type]
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)


def print_tools_table(catalog: ToolCatalog) -> None:
    """Pretty-print declared tools as a table."""
    table = Table(title="Declared Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Command")
    table.add_column("Parameters")
    table.add_column("Description")

    for decl in catalog:
        params = ", ".join(
            m.source_param for m in decl.parameter_mappings if m.source_param is not None
        )
        table.add_row(
            decl.name,
            decl.command,
            params or "-",
            _truncate(decl.tool_spec.description or ""),
        )

    console.print(table)


def _truncate(text: str, max_len: int = 60) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
