"""Serving layer: request dispatch and transports."""

from toolbridge.server.dispatcher import RequestDispatcher
from toolbridge.server.sessions import Session, SessionStore
from toolbridge.server.transport import LineTransport, StdioTransport
from toolbridge.server.websocket import WebSocketServer

__all__ = [
    "LineTransport",
    "RequestDispatcher",
    "Session",
    "SessionStore",
    "StdioTransport",
    "WebSocketServer",
]
