"""
Connection entity - represents one client's live transport session.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Set
from uuid import uuid4


class ConnectionState(str, Enum):
    """Per-connection protocol state."""

    UNJOINED = "unjoined"
    JOINED = "joined"
    CLOSED = "closed"


class MessageSink(Protocol):
    """
    Transport-side send capability for one connection.

    ``send`` is fire-and-forget: it must not block and must not raise
    because a peer is slow or gone.
    """

    @property
    def is_open(self) -> bool:
        ...

    def send(self, payload: Dict[str, Any]) -> None:
        ...


class Connection:
    """
    Connection entity representing a client session.

    The transport owns the underlying socket; the relay only holds
    references to this handle through the connection registry.

    Attributes:
        id: Unique connection identifier
        sink: Transport send capability
        connected_at: Connection timestamp (UTC)
        state: Explicit protocol state tag
        channels: Names of channels this connection has joined
    """

    def __init__(
        self,
        sink: MessageSink,
        connection_id: Optional[str] = None,
        connected_at: Optional[datetime] = None,
    ):
        """
        Initialize Connection entity.

        Args:
            sink: Transport send capability
            connection_id: Optional ID (generated if not provided)
            connected_at: Optional connection timestamp
        """
        self.id: str = connection_id or f"conn_{uuid4().hex[:12]}"
        self.sink = sink
        self.connected_at: datetime = connected_at or datetime.now(timezone.utc)
        self.state: ConnectionState = ConnectionState.UNJOINED
        self.channels: Set[str] = set()

    @property
    def is_open(self) -> bool:
        """Check if the connection can still receive payloads."""
        return self.state is not ConnectionState.CLOSED and self.sink.is_open

    def attach(self, channel_name: str) -> None:
        """Record membership in a channel."""
        if self.state is ConnectionState.CLOSED:
            return
        self.channels.add(channel_name)
        self.state = ConnectionState.JOINED

    def detach(self, channel_name: str) -> None:
        """Forget membership in a channel."""
        self.channels.discard(channel_name)
        if not self.channels and self.state is ConnectionState.JOINED:
            self.state = ConnectionState.UNJOINED

    def close(self) -> None:
        """Mark the connection closed. Terminal."""
        self.state = ConnectionState.CLOSED

    def send(self, payload: Dict[str, Any]) -> bool:
        """
        Hand a payload to the transport.

        Args:
            payload: JSON-serializable message

        Returns:
            True if the payload was handed to the sink, False if the
            connection is no longer open
        """
        if not self.is_open:
            return False
        self.sink.send(payload)
        return True

    def __eq__(self, other) -> bool:
        """Check equality based on connection ID."""
        if not isinstance(other, Connection):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on connection ID."""
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Connection(id={self.id}, state={self.state.value}, "
            f"channels={sorted(self.channels)})"
        )
