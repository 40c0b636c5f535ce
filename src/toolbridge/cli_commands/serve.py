"""``toolbridge serve``: answer MCP requests on stdio or WebSocket."""

from __future__ import annotations

import asyncio
import sys

import click

from toolbridge import __version__
from toolbridge.cli_commands._output import catalog_source, err_console, load_catalog
from toolbridge.server.websocket import DEFAULT_HOST, DEFAULT_PORT
from toolbridge.utils.log_config import LOG_LEVELS


@click.command()
@catalog_source
@click.option(
    "--transport",
    type=click.Choice(["stdio", "websocket"]),
    default="stdio",
    help="Transport to serve on.",
)
@click.option("--host", default=DEFAULT_HOST, help="Bind address (websocket only).")
@click.option("--port", default=DEFAULT_PORT, type=int, help="Bind port (websocket only).")
@click.option("--server-name", default="toolbridge", help="Name reported by initialize.")
@click.option("--server-version", default=__version__, help="Version reported by initialize.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="TOOLBRIDGE_LOG_LEVEL",
    help="Diagnostic log level (written to stderr).",
)
@click.option("--telemetry", is_flag=True, help="Export OpenTelemetry spans to stderr.")
@click.option(
    "--otlp-endpoint",
    default=None,
    envvar="TOOLBRIDGE_OTLP_ENDPOINT",
    help="Export OpenTelemetry spans over OTLP/gRPC to this endpoint.",
)
def serve(
    config: str | None,
    tools_json: str | None,
    transport: str,
    host: str,
    port: int,
    server_name: str,
    server_version: str,
    log_level: str,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve the tools declared in CONFIG (or --tools-json).

    With the stdio transport, one JSON-RPC request is read per line from
    stdin and one response is written per line to stdout.
    """
    from toolbridge.server.dispatcher import RequestDispatcher
    from toolbridge.utils.log_config import configure_logging

    configure_logging(log_level)
    catalog = load_catalog(config, tools_json)

    if telemetry or otlp_endpoint:
        from toolbridge.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(
                service_name=server_name,
                export_to_console=telemetry,
                otlp_endpoint=otlp_endpoint,
            )
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    dispatcher = RequestDispatcher(
        catalog,
        server_name=server_name,
        server_version=server_version,
    )

    if transport == "stdio":
        from toolbridge.server.transport import StdioTransport

        try:
            asyncio.run(dispatcher.serve(StdioTransport()))
        except KeyboardInterrupt:
            pass
        return

    from toolbridge.server.websocket import WebSocketServer

    server = WebSocketServer(dispatcher, host=host, port=port)
    try:
        asyncio.run(server.serve_forever())
    except ImportError as exc:
        err_console.print(f"[red]Transport error:[/red] {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass
