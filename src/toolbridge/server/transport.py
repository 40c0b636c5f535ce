"""Line transports: newline-delimited JSON-RPC framing.

Each transport satisfies the :class:`LineTransport` protocol: one request
per line in, one response per line out.
"""

from __future__ import annotations

import asyncio
import sys
from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class LineTransport(Protocol):
    """Abstract line-oriented transport."""

    async def read_line(self) -> str | None: ...
    async def write_line(self, line: str) -> None: ...


class StdioTransport:
    """Reads requests from stdin and writes responses to stdout.

    Blocking reads run in a worker thread so the event loop stays free
    while waiting for input.  Undecodable bytes are replaced rather than
    raising, so a garbled line turns into a parse error, not a crash.
    """

    def __init__(self, stdin: IO[Any] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    async def read_line(self) -> str | None:
        """Return the next line without its terminator, or ``None`` at EOF."""
        stream = getattr(self._stdin, "buffer", self._stdin)
        raw = await asyncio.to_thread(stream.readline)
        if not raw:
            return None
        line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        return line.rstrip("\r\n")

    async def write_line(self, line: str) -> None:
        """Write *line* plus a newline and flush immediately."""
        self._stdout.write(line + "\n")
        self._stdout.flush()
