"""Protocol layer: JSON-RPC envelopes, MCP payloads, and response encoding."""

from toolbridge.protocol.encoder import PROTOCOL_VERSION, ResponseEncoder
from toolbridge.protocol.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InvalidParamsError,
    MethodNotFoundError,
    ProtocolError,
    ProtocolParseError,
    ToolNotFoundError,
)
from toolbridge.protocol.models import (
    CallToolParams,
    CallToolRequest,
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
)

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "PROTOCOL_VERSION",
    "CallToolParams",
    "CallToolRequest",
    "CallToolResult",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "ProtocolError",
    "ProtocolParseError",
    "ResponseEncoder",
    "ToolNotFoundError",
]
