"""``toolbridge tools``: inspect and try out declared tools."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click
from rich.markup import escape

from toolbridge.cli_commands._output import (
    catalog_source,
    console,
    err_console,
    load_catalog,
    print_tools_table,
)


@click.group()
def tools() -> None:
    """Inspect and run declared tools."""


@tools.command("list")
@catalog_source
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
def list_tools(config: str | None, tools_json: str | None, fmt: str) -> None:
    """Validate the configuration and list its tools in declaration order."""
    catalog = load_catalog(config, tools_json)

    if len(catalog) == 0:
        console.print("[yellow]No tools declared.[/yellow]")
        return

    if fmt == "json":
        console.print_json(json.dumps([spec.to_wire() for spec in catalog.list_all()]))
    else:
        print_tools_table(catalog)


@tools.command("call")
@click.argument("name")
@catalog_source
@click.option(
    "--arg",
    "-a",
    "pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="String argument for the call (repeatable).",
)
@click.option("--json-args", default=None, help="Call arguments as a JSON object.")
@click.option("--dry-run", is_flag=True, help="Print the command line instead of running it.")
def call(
    name: str,
    config: str | None,
    tools_json: str | None,
    pairs: tuple[str, ...],
    json_args: str | None,
    dry_run: bool,
) -> None:
    """Run tool NAME once, locally, and print its output."""
    from toolbridge.runtime.errors import ArgumentTypeError
    from toolbridge.runtime.executor import ProcessExecutor
    from toolbridge.runtime.mapper import build_argv
    from toolbridge.runtime.models import FailureOutcome, SpawnErrorOutcome

    catalog = load_catalog(config, tools_json)
    declaration = catalog.get(name)
    if declaration is None:
        err_console.print(f"[red]Tool not found:[/red] {name}")
        sys.exit(1)

    arguments = _collect_arguments(pairs, json_args)

    try:
        argv = build_argv(declaration.parameter_mappings, arguments)
    except ArgumentTypeError as exc:
        err_console.print(f"[red]Invalid arguments:[/red] {exc}")
        sys.exit(1)

    if dry_run:
        click.echo(json.dumps([declaration.command, *argv]))
        return

    outcome = asyncio.run(ProcessExecutor().run_declaration(declaration, argv))
    if isinstance(outcome, FailureOutcome):
        click.echo(outcome.text, nl=False, err=True)
        sys.exit(outcome.returncode if outcome.returncode > 0 else 1)
    if isinstance(outcome, SpawnErrorOutcome):
        err_console.print(f"[red]{escape(outcome.text)}[/red]")
        sys.exit(1)
    click.echo(outcome.text, nl=False)


def _collect_arguments(pairs: tuple[str, ...], json_args: str | None) -> dict[str, Any]:
    arguments: dict[str, Any] = {}
    if json_args is not None:
        try:
            loaded = json.loads(json_args)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(str(exc), param_hint="--json-args") from exc
        if not isinstance(loaded, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--json-args")
        arguments.update(loaded)
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--arg")
        arguments[key] = value
    return arguments
