"""Protocol models: JSON-RPC 2.0 envelopes and MCP payloads.

Implements the subset of the Model Context Protocol (2024-11-05) this
server speaks: ``initialize``, ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message.

    ``id`` is opaque and echoed back verbatim, whatever JSON value it holds.
    """

    jsonrpc: str = "2.0"
    method: str
    id: Any = None
    params: dict[str, Any] | None = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message (exactly one of result / error)."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the on-the-wire shape; ``id`` is always present."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result if self.result is not None else {}
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class CallToolParams(BaseModel):
    """``params`` of a ``tools/call`` request."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_means_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class CallToolRequest(BaseModel):
    """A typed ``tools/call`` request."""

    jsonrpc: str = "2.0"
    method: Literal["tools/call"] = "tools/call"
    id: Any = None
    params: CallToolParams


class TextContent(BaseModel):
    """A single text block in a tool result."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """Result of ``tools/call``."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")


class Implementation(BaseModel):
    """Name and version of the server implementation."""

    name: str
    version: str


class PromptsCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool = Field(default=False, alias="listChanged")


class ResourcesCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subscribe: bool = False
    list_changed: bool = Field(default=False, alias="listChanged")


class ToolsCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool = Field(default=False, alias="listChanged")


class ServerCapabilities(BaseModel):
    """Static capability set: everything present, nothing dynamic."""

    experimental: dict[str, Any] = Field(default_factory=dict)
    logging: dict[str, Any] = Field(default_factory=dict)
    prompts: PromptsCapability = Field(default_factory=PromptsCapability)
    resources: ResourcesCapability = Field(default_factory=ResourcesCapability)
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class InitializeResult(BaseModel):
    """Result of the ``initialize`` capability handshake."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: Implementation = Field(alias="serverInfo")
    tools: list[dict[str, Any]] = Field(default_factory=list)


class ListToolsResult(BaseModel):
    """Result of ``tools/list``.  Pagination is not supported."""

    model_config = ConfigDict(populate_by_name=True)

    tools: list[dict[str, Any]]
    next_cursor: str | None = Field(default=None, alias="nextCursor")
