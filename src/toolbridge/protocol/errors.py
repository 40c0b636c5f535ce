"""JSON-RPC protocol errors.

Each error carries the JSON-RPC ``code`` the dispatcher puts into the error
envelope.  Tool execution failures are *not* protocol errors; they are
reported as ``isError`` content in a successful ``tools/call`` response.
"""

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-level failures."""

    code: int = INTERNAL_ERROR


class ProtocolParseError(ProtocolError):
    """A request envelope or ``tools/call`` body could not be parsed."""

    code = PARSE_ERROR

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Parse error" + (f": {detail}" if detail else ""))


class MethodNotFoundError(ProtocolError):
    """The request named a method this server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class ToolNotFoundError(ProtocolError):
    """A ``tools/call`` named a tool absent from the catalog."""

    code = METHOD_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class InvalidParamsError(ProtocolError):
    """Call arguments could not be turned into command-line tokens."""

    code = INVALID_PARAMS

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid params" + (f": {detail}" if detail else ""))
