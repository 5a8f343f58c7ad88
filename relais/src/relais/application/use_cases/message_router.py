"""
Message router - the relay protocol state machine.

The transport calls one method per connection event:

    on_open(connection)            -> welcome notice
    on_message(connection, data)   -> join / list_channels / message
    on_close(connection)           -> leave every channel, notify peers

Per-connection state is Unjoined -> Joined(channels) -> Closed. There is
no leave message: connections leave channels only by disconnecting.
"""

import threading
from typing import Any, Dict, List, Optional

from shared.reporter import SystemReporter

from relais.application.dto import (
    BroadcastEnvelope,
    ChannelSnapshot,
    ChannelsListEnvelope,
    ErrorEnvelope,
    JoinAck,
    SystemEnvelope,
)
from relais.application.use_cases.broadcast_message import (
    BroadcastMessageUseCase,
)
from relais.application.use_cases.manage_channel import ManageChannelUseCase
from relais.domain.entities import Connection, ConnectionState
from relais.domain.exceptions import ChannelError, NotChannelMemberError
from relais.domain.value_objects import ChannelName
from relais.infrastructure.registry import (
    ChannelMetadataStore,
    ConnectionRegistry,
    LeaveResult,
)

WELCOME_MESSAGE = "Please join a channel to start chatting"
USER_JOINED_MESSAGE = "A new user has joined the channel"
USER_LEFT_MESSAGE = "A user has left the channel"


class MessageRouter:
    """
    Routes inbound messages and connection lifecycle events.

    All membership mutations and the sends that follow them run under
    one re-entrant lock, so every broadcast sees the member set its own
    mutation produced. Sends only enqueue and never block while the
    lock is held.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        metadata_store: ChannelMetadataStore,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize router.

        Args:
            registry: Channel membership
            metadata_store: Channel descriptive state
            reporter: Optional SystemReporter for logging
        """
        self.registry = registry
        self.metadata_store = metadata_store
        self.reporter = reporter
        self.manage_channel = ManageChannelUseCase(registry, metadata_store)
        self.broadcast = BroadcastMessageUseCase(reporter=reporter)
        self._lock = threading.RLock()

        self._handlers = {
            "join": self._handle_join,
            "list_channels": self._handle_list_channels,
            "message": self._handle_message,
        }

    # ================================================================
    # Lifecycle events
    # ================================================================

    def on_open(self, connection: Connection) -> None:
        """Greet a freshly accepted connection."""
        self._log_info(f"New client connected [conn={connection.id}]")
        connection.send(SystemEnvelope(message=WELCOME_MESSAGE).to_payload())

    def on_message(self, connection: Connection, data: Any) -> None:
        """
        Handle one decoded inbound message.

        Protocol errors are answered with an ``error`` envelope; unknown
        or malformed messages are logged and ignored.
        """
        if not isinstance(data, dict):
            self._log_debug(
                f"Ignoring non-object message [conn={connection.id}]"
            )
            return

        message_type = data.get("type")
        handler = None
        if isinstance(message_type, str):
            handler = self._handlers.get(message_type)

        if handler is None:
            self._log_debug(
                f"Ignoring unknown message type [conn={connection.id}] "
                f"[type={message_type!r}]"
            )
            return

        with self._lock:
            if connection.state is ConnectionState.CLOSED:
                return
            try:
                handler(connection, data)
            except ChannelError as e:
                self._log_debug(
                    f"Rejected {message_type} [conn={connection.id}]: {e}"
                )
                connection.send(ErrorEnvelope(message=str(e)).to_payload())

    def on_close(self, connection: Connection) -> List[LeaveResult]:
        """
        Tear down a connection's memberships.

        Emptied channels disappear; remaining members of the other
        channels are told a user left. Closing twice is a no-op.

        Returns:
            One LeaveResult per channel the connection left
        """
        with self._lock:
            if connection.state is ConnectionState.CLOSED:
                return []

            connection.close()
            results = self.manage_channel.leave_all(connection)

            for result in results:
                if result.emptied:
                    continue
                self.broadcast.execute(
                    self.registry.list_members(result.channel),
                    SystemEnvelope(
                        message=USER_LEFT_MESSAGE, channel=result.channel
                    ).to_payload(),
                    exclude=connection,
                )

        self._log_info(
            f"Client disconnected [conn={connection.id}] "
            f"[channels_left={[r.channel for r in results]}]"
        )
        return results

    # ================================================================
    # Queries
    # ================================================================

    def list_channels(self) -> List[Dict[str, Any]]:
        """Snapshot of every known channel."""
        with self._lock:
            return self.metadata_store.list()

    def channel_count(self) -> int:
        """Number of live channels."""
        with self._lock:
            return len(self.registry.channels)

    def total_connections(self) -> int:
        """Number of distinct connections in at least one channel."""
        with self._lock:
            return self.registry.get_total_connections()

    def check_consistency(self) -> List[str]:
        """Registry/metadata violations, read between operations."""
        with self._lock:
            return self.manage_channel.check_consistency()

    # ================================================================
    # Message handlers (called with the lock held)
    # ================================================================

    def _handle_join(self, connection: Connection, data: Dict[str, Any]) -> None:
        channel = ChannelName(data.get("channel")).value
        document_name = data.get("documentName")
        if not isinstance(document_name, str) or not document_name:
            document_name = None

        self.manage_channel.join(connection, channel, document_name)

        connection.send(
            SystemEnvelope(
                message=f"Joined channel: {channel}", channel=channel
            ).to_payload()
        )
        request_id = {"id": data["id"]} if "id" in data else {}
        ack = JoinAck(result=f"Connected to channel: {channel}", **request_id)
        connection.send(
            SystemEnvelope(message=ack.to_payload(), channel=channel).to_payload()
        )

        notified = self.broadcast.execute(
            self.registry.list_members(channel),
            SystemEnvelope(message=USER_JOINED_MESSAGE, channel=channel).to_payload(),
            exclude=connection,
        )

        self._log_info(
            f"Client joined channel [conn={connection.id}] "
            f"[channel={channel}] [members={self.registry.get_member_count(channel)}] "
            f"[notified={notified}]"
        )

    def _handle_list_channels(
        self, connection: Connection, data: Dict[str, Any]
    ) -> None:
        envelope = ChannelsListEnvelope(
            channels=[
                ChannelSnapshot(**snapshot) for snapshot in self.metadata_store.list()
            ]
        )
        connection.send(envelope.to_payload())

    def _handle_message(self, connection: Connection, data: Dict[str, Any]) -> None:
        channel = ChannelName(data.get("channel")).value

        if not self.registry.is_member(channel, connection):
            raise NotChannelMemberError(channel, connection.id)

        body = {"message": data["message"]} if "message" in data else {}
        delivered = self.broadcast.execute(
            self.registry.list_members(channel),
            lambda member: BroadcastEnvelope(
                sender="You" if member == connection else "User",
                channel=channel,
                **body,
            ).to_payload(),
        )

        self._log_debug(
            f"Broadcast [conn={connection.id}] [channel={channel}] "
            f"[delivered={delivered}]"
        )

    # ================================================================
    # Logging helpers
    # ================================================================

    def _log_info(self, msg: str) -> None:
        if self.reporter:
            self.reporter.info(msg, context="MessageRouter")

    def _log_debug(self, msg: str) -> None:
        if self.reporter:
            self.reporter.debug(msg, context="MessageRouter")
