"""ResponseEncoder: builds JSON-RPC envelopes for each supported method."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from toolbridge.protocol.errors import INTERNAL_ERROR, ProtocolError
from toolbridge.protocol.models import (
    CallToolResult,
    Implementation,
    InitializeResult,
    JsonRpcError,
    JsonRpcResponse,
    ListToolsResult,
    TextContent,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolbridge.catalog.models import ToolSpec
    from toolbridge.runtime.models import ExecutionOutcome

PROTOCOL_VERSION = "2024-11-05"


class ResponseEncoder:
    """Builds success and error envelopes and serializes them to lines.

    Tool failures (non-zero exit, spawn errors) are encoded as *successful*
    ``tools/call`` results with ``isError`` set; only protocol problems use
    the JSON-RPC error shape.
    """

    def __init__(self, server_name: str, server_version: str) -> None:
        self._server_info = Implementation(name=server_name, version=server_version)

    @property
    def server_info(self) -> Implementation:
        return self._server_info

    def initialize(self, request_id: Any, tools: Sequence[ToolSpec]) -> JsonRpcResponse:
        """Capability handshake: fixed version, static capabilities, all tools."""
        result = InitializeResult(
            protocol_version=PROTOCOL_VERSION,
            server_info=self._server_info,
            tools=[spec.to_wire() for spec in tools],
        )
        return JsonRpcResponse(id=request_id, result=result.model_dump(by_alias=True))

    def tools_list(self, request_id: Any, tools: Sequence[ToolSpec]) -> JsonRpcResponse:
        """Ordered tool specs exactly as declared; never a ``nextCursor``."""
        result = ListToolsResult(tools=[spec.to_wire() for spec in tools])
        data = result.model_dump(by_alias=True)
        if data.get("nextCursor") is None:
            data.pop("nextCursor", None)
        return JsonRpcResponse(id=request_id, result=data)

    def tools_call(self, request_id: Any, outcome: ExecutionOutcome) -> JsonRpcResponse:
        """Wrap one execution outcome as a single text block."""
        result = CallToolResult(
            content=[TextContent(text=outcome.text)],
            is_error=outcome.is_error,
        )
        return JsonRpcResponse(id=request_id, result=result.model_dump(by_alias=True))

    @staticmethod
    def error(request_id: Any, exc: ProtocolError) -> JsonRpcResponse:
        """Error envelope for a :class:`ProtocolError`."""
        return JsonRpcResponse(
            id=request_id,
            error=JsonRpcError(code=exc.code, message=str(exc)),
        )

    @staticmethod
    def internal_error(request_id: Any, detail: str) -> JsonRpcResponse:
        return JsonRpcResponse(
            id=request_id,
            error=JsonRpcError(code=INTERNAL_ERROR, message=f"Internal error: {detail}"),
        )

    @staticmethod
    def encode(response: JsonRpcResponse) -> str:
        """Serialize *response* as one compact, ASCII-only JSON line (no newline)."""
        return json.dumps(response.to_wire(), separators=(",", ":"))
