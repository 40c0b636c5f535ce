"""Tests for JSON-RPC and MCP models."""

import pytest
from pydantic import ValidationError

from toolbridge.protocol.models import (
    CallToolRequest,
    CallToolResult,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerCapabilities,
    TextContent,
)


class TestJsonRpcRequest:
    def test_defaults(self) -> None:
        req = JsonRpcRequest(method="tools/list")
        assert req.jsonrpc == "2.0"
        assert req.id is None
        assert req.params is None

    @pytest.mark.parametrize("request_id", [7, "abc", 1.5, None, {"nested": [1]}])
    def test_id_is_opaque(self, request_id: object) -> None:
        req = JsonRpcRequest.model_validate({"method": "x", "id": request_id})
        assert req.id == request_id

    def test_method_required(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate({"id": 1})

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate([1, 2])


class TestJsonRpcResponse:
    def test_success_wire_shape(self) -> None:
        wire = JsonRpcResponse(id=3, result={"ok": True}).to_wire()
        assert wire == {"jsonrpc": "2.0", "id": 3, "result": {"ok": True}}

    def test_error_wire_shape(self) -> None:
        resp = JsonRpcResponse(id="a", error=JsonRpcError(code=-32601, message="nope"))
        assert resp.to_wire() == {
            "jsonrpc": "2.0",
            "id": "a",
            "error": {"code": -32601, "message": "nope"},
        }

    def test_null_id_is_kept(self) -> None:
        resp = JsonRpcResponse(error=JsonRpcError(code=-32700, message="bad"))
        assert "id" in resp.to_wire()
        assert resp.to_wire()["id"] is None

    def test_error_data_included_when_set(self) -> None:
        resp = JsonRpcResponse(id=1, error=JsonRpcError(code=1, message="m", data={"k": 1}))
        assert resp.to_wire()["error"]["data"] == {"k": 1}


class TestCallToolRequest:
    def test_parse(self) -> None:
        req = CallToolRequest.model_validate({
            "jsonrpc": "2.0",
            "id": 9,
            "method": "tools/call",
            "params": {"name": "echo", "arguments": {"text": "hi"}},
        })
        assert req.params.name == "echo"
        assert req.params.arguments == {"text": "hi"}

    def test_arguments_optional(self) -> None:
        req = CallToolRequest.model_validate({"method": "tools/call", "params": {"name": "x"}})
        assert req.params.arguments == {}

    def test_null_arguments(self) -> None:
        req = CallToolRequest.model_validate({
            "method": "tools/call",
            "params": {"name": "x", "arguments": None},
        })
        assert req.params.arguments == {}

    def test_missing_name(self) -> None:
        with pytest.raises(ValidationError):
            CallToolRequest.model_validate({"method": "tools/call", "params": {}})

    def test_missing_params(self) -> None:
        with pytest.raises(ValidationError):
            CallToolRequest.model_validate({"method": "tools/call"})


class TestResults:
    def test_call_tool_result_aliases(self) -> None:
        result = CallToolResult(content=[TextContent(text="x")], is_error=True)
        data = result.model_dump(by_alias=True)
        assert data == {"content": [{"type": "text", "text": "x"}], "isError": True}

    def test_static_capabilities(self) -> None:
        data = ServerCapabilities().model_dump(by_alias=True)
        assert data == {
            "experimental": {},
            "logging": {},
            "prompts": {"listChanged": False},
            "resources": {"subscribe": False, "listChanged": False},
            "tools": {"listChanged": False},
        }

    def test_initialize_result_aliases(self) -> None:
        result = InitializeResult(
            protocol_version="2024-11-05",
            server_info={"name": "s", "version": "1"},  # type: ignore[arg-type]
        )
        data = result.model_dump(by_alias=True)
        assert data["protocolVersion"] == "2024-11-05"
        assert data["serverInfo"] == {"name": "s", "version": "1"}
