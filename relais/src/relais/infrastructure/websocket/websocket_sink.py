"""
WebSocket sink - fire-and-forget outbound queue for one connection.
"""

import asyncio
from typing import Any, Dict, Optional

from fastapi import WebSocket
from shared.reporter import SystemReporter
from starlette.websockets import WebSocketState

_CLOSE = object()


class WebSocketSink:
    """
    Adapter from a FastAPI WebSocket to the MessageSink protocol.

    ``send`` only enqueues; a writer task (``run``) drains the queue to
    the socket. A slow or dead peer therefore never blocks the relay.
    """

    def __init__(
        self,
        websocket: WebSocket,
        connection_id: Optional[str] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        self.websocket = websocket
        self.connection_id = connection_id
        self.reporter = reporter
        self.sent_count = 0
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def is_open(self) -> bool:
        """Check if payloads can still be delivered."""
        return (
            not self._closed
            and self.websocket.client_state == WebSocketState.CONNECTED
        )

    def send(self, payload: Dict[str, Any]) -> None:
        """Enqueue a payload for delivery."""
        if self._closed:
            return
        self._queue.put_nowait(payload)

    def close(self) -> None:
        """Stop accepting payloads; the writer drains what is queued."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSE)

    async def run(self) -> None:
        """Writer loop. Returns once closed or after the first failed send."""
        while True:
            payload = await self._queue.get()
            if payload is _CLOSE:
                return

            try:
                await self.websocket.send_json(payload)
                self.sent_count += 1
            except Exception as e:
                self._closed = True
                if self.reporter:
                    self.reporter.warning(
                        f"Send failed, dropping connection output "
                        f"[conn={self.connection_id}]: "
                        f"{type(e).__name__}: {str(e)}",
                        context="WebSocket",
                    )
                return
