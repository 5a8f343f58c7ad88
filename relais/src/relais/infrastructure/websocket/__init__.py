"""
WebSocket infrastructure for Relais.
"""

from relais.infrastructure.websocket.websocket_sink import WebSocketSink

__all__ = ["WebSocketSink"]
