"""Tracing for tool calls.

The dispatcher wraps every ``tools/call`` in a ``toolbridge.tools.call``
span carrying the tool name, the number of argv tokens handed to the child,
the outcome kind (``success``, ``failure`` or ``spawn_error``) and whether
the result was flagged ``isError``.  Requests that fail before a tool is
resolved (parse errors, unknown methods or tools) produce no span.

Spans are no-ops until :func:`configure_telemetry` installs an SDK
provider, which ``toolbridge serve --telemetry`` does at startup (requires
the ``otel`` extra).
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

# Span attributes set by RequestDispatcher._tools_call.
ATTR_TOOL_NAME = "toolbridge.tool.name"
ATTR_TOOL_ARGC = "toolbridge.tool.argc"
ATTR_TOOL_IS_ERROR = "toolbridge.tool.is_error"
ATTR_OUTCOME = "toolbridge.tool.outcome"

SPAN_TOOLS_CALL = "toolbridge.tools.call"

_INSTRUMENTATION_NAME = "toolbridge"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*, defaulting to the ``toolbridge`` instrumentation scope."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "toolbridge",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a tracer provider that exports toolbridge spans.

    The dispatcher's module-level tracer is a proxy, so every span started
    after this call is exported, even though the tracer was created first.

    Parameters
    ----------
    service_name:
        The ``service.name`` resource attribute.
    export_to_console:
        If ``True``, export spans as JSON to **stderr**; stdout carries the
        protocol stream.
    otlp_endpoint:
        If set, export spans via OTLP/gRPC to this endpoint.

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install toolbridge[otel]"
        )
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name})  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    provider = TracerProvider(resource=resource)  # pyright: ignore[reportUnknownVariableType]

    if export_to_console:
        _add_console_exporter(provider, SimpleSpanProcessor)

    if otlp_endpoint:
        _add_otlp_exporter(provider, BatchSpanProcessor, otlp_endpoint)

    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]


def _add_console_exporter(provider: Any, processor_cls: Any) -> None:
    """Attach the console exporter (JSON to stderr)."""
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]

    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))


def _add_otlp_exporter(provider: Any, processor_cls: Any, endpoint: str) -> None:
    """Attach the OTLP gRPC exporter."""
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required for OTLP export. "
            "Install it with: pip install toolbridge[otel]"
        )
        raise ImportError(msg) from exc

    provider.add_span_processor(processor_cls(OTLPSpanExporter(endpoint=endpoint)))
