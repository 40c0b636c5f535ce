"""WebSocketServer: serves the dispatcher over WebSocket.

One JSON-RPC message per text frame.  Requires the ``websockets`` package
(optional dependency ``ws``).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from toolbridge.server.sessions import SessionStore

if TYPE_CHECKING:
    from toolbridge.server.dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


class WebSocketServer:
    """Accepts WebSocket clients and feeds their messages to a dispatcher.

    Each connection gets its own :class:`~toolbridge.server.sessions.Session`
    for its lifetime.  Messages on one connection are answered in order;
    separate connections are served concurrently.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        *,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        sessions: SessionStore | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._host = host
        self._port = port
        self._sessions = sessions if sessions is not None else SessionStore()

    @property
    def sessions(self) -> SessionStore:
        return self._sessions

    async def handle_connection(self, connection: Any) -> None:
        """Serve one client until it disconnects."""
        session = self._sessions.create(peer=_peer_name(connection))
        logger.info("Session %s opened (%s)", session.session_id, session.peer)
        try:
            async for message in connection:
                text = message.decode("utf-8", errors="replace") if isinstance(message, bytes) else message
                reply = await self._dispatcher.handle_line(text)
                if reply is not None:
                    await connection.send(reply)
        finally:
            self._sessions.remove(session.session_id)
            logger.info("Session %s closed", session.session_id)

    async def serve_forever(self) -> None:
        """Listen on ``host:port`` until cancelled."""
        try:
            import websockets  # type: ignore[import-untyped]
        except ImportError as exc:
            msg = "websockets package required, install with: pip install toolbridge[ws]"
            raise ImportError(msg) from exc

        async with websockets.serve(self.handle_connection, self._host, self._port):
            logger.info("Listening on ws://%s:%d", self._host, self._port)
            await asyncio.Future()


def _peer_name(connection: Any) -> str:
    address = getattr(connection, "remote_address", None)
    if isinstance(address, tuple) and len(address) >= 2:
        return f"{address[0]}:{address[1]}"
    return str(address) if address else ""
