"""RequestDispatcher: the JSON-RPC method state machine.

One line in, one line out.  No state is carried between requests; the only
shared object is the read-only :class:`~toolbridge.catalog.ToolCatalog`.

Flow for ``tools/call``::

    line -> envelope -> CallToolRequest -> catalog.lookup -> build_argv
         -> ProcessExecutor.run -> ResponseEncoder.tools_call -> line
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from toolbridge import __version__
from toolbridge.protocol.encoder import ResponseEncoder
from toolbridge.protocol.errors import (
    InvalidParamsError,
    MethodNotFoundError,
    ProtocolError,
    ProtocolParseError,
)
from toolbridge.protocol.models import CallToolRequest, JsonRpcRequest
from toolbridge.runtime.errors import ArgumentTypeError
from toolbridge.runtime.executor import ProcessExecutor
from toolbridge.runtime.mapper import build_argv
from toolbridge.utils.telemetry import (
    ATTR_OUTCOME,
    ATTR_TOOL_ARGC,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    SPAN_TOOLS_CALL,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from toolbridge.catalog.catalog import ToolCatalog
    from toolbridge.protocol.models import JsonRpcResponse
    from toolbridge.server.transport import LineTransport

    _Handler = Callable[[JsonRpcRequest, Any], Awaitable[JsonRpcResponse]]

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class RequestDispatcher:
    """Routes JSON-RPC requests to the catalog, mapper and executor.

    Usage::

        dispatcher = RequestDispatcher(catalog)
        await dispatcher.serve(StdioTransport())

    Each line is handled to completion (including waiting for any child
    process) before the next one is read.
    """

    def __init__(
        self,
        catalog: ToolCatalog,
        *,
        executor: ProcessExecutor | None = None,
        server_name: str = "toolbridge",
        server_version: str = __version__,
    ) -> None:
        self._catalog = catalog
        self._executor = executor or ProcessExecutor()
        self._encoder = ResponseEncoder(server_name, server_version)
        self._handlers: dict[str, _Handler] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    @property
    def catalog(self) -> ToolCatalog:
        return self._catalog

    @property
    def encoder(self) -> ResponseEncoder:
        return self._encoder

    async def serve(self, transport: LineTransport) -> int:
        """Answer requests from *transport* until end of input.

        Returns the number of responses written.
        """
        answered = 0
        while True:
            line = await transport.read_line()
            if line is None:
                break
            reply = await self.handle_line(line)
            if reply is None:
                continue
            await transport.write_line(reply)
            answered += 1
        logger.info("Input closed after %d response(s)", answered)
        return answered

    async def handle_line(self, line: str) -> str | None:
        """Handle one raw line; ``None`` for blank lines."""
        response = await self.handle(line)
        return None if response is None else self._encoder.encode(response)

    async def handle(self, line: str) -> JsonRpcResponse | None:
        """Parse, route and answer one request line."""
        if not line.strip():
            return None

        # JSONDecodeError, ValidationError and the int digit limit are all ValueErrors.
        try:
            raw: Any = json.loads(line)
            request = JsonRpcRequest.model_validate(raw)
        except (ValueError, RecursionError) as exc:
            logger.warning("Unparseable request line: %s", exc)
            return self._encoder.error(None, ProtocolParseError(_short_detail(exc)))

        try:
            handler = self._handlers.get(request.method)
            if handler is None:
                raise MethodNotFoundError(request.method)
            return await handler(request, raw)
        except ProtocolError as exc:
            logger.warning("%s (id=%r)", exc, request.id)
            return self._encoder.error(request.id, exc)
        except Exception as exc:
            logger.exception("Unhandled error while processing %s", request.method)
            return self._encoder.internal_error(request.id, str(exc))

    async def _initialize(self, request: JsonRpcRequest, raw: Any) -> JsonRpcResponse:
        return self._encoder.initialize(request.id, self._catalog.list_all())

    async def _tools_list(self, request: JsonRpcRequest, raw: Any) -> JsonRpcResponse:
        return self._encoder.tools_list(request.id, self._catalog.list_all())

    async def _tools_call(self, request: JsonRpcRequest, raw: Any) -> JsonRpcResponse:
        try:
            call = CallToolRequest.model_validate(raw)
        except ValidationError as exc:
            raise ProtocolParseError(_short_detail(exc)) from exc

        name = call.params.name
        declaration = self._catalog.lookup(name)

        with _tracer.start_as_current_span(SPAN_TOOLS_CALL) as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                argv = build_argv(declaration.parameter_mappings, call.params.arguments)
            except ArgumentTypeError as exc:
                raise InvalidParamsError(str(exc)) from exc
            span.set_attribute(ATTR_TOOL_ARGC, len(argv))

            outcome = await self._executor.run_declaration(declaration, argv)
            span.set_attribute(ATTR_OUTCOME, outcome.kind)
            span.set_attribute(ATTR_TOOL_IS_ERROR, outcome.is_error)

        logger.debug("Tool %s finished: %s", name, outcome.kind)
        return self._encoder.tools_call(request.id, outcome)


def _short_detail(exc: Exception) -> str:
    """First line of an exception message; pydantic errors are verbose."""
    text = str(exc)
    return text.splitlines()[0] if text else type(exc).__name__
