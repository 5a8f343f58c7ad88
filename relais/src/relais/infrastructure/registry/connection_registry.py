"""
In-memory connection registry with production logging.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from shared.reporter import SystemReporter

from relais.domain.entities import Connection


@dataclass(frozen=True)
class LeaveResult:
    """Outcome of removing a connection from one channel."""

    channel: str
    emptied: bool


class ConnectionRegistry:
    """
    Authoritative mapping from channel name to member connections.

    Not synchronized on its own: callers serialize access (see
    MessageRouter).
    """

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.channels: Dict[str, Set[Connection]] = {}
        self.reporter = reporter

    def join(self, channel_name: str, connection: Connection) -> bool:
        """
        Add connection to channel, creating the channel if absent.

        Joining twice has no additional effect.

        Returns:
            True if the channel was created by this call
        """
        is_new_channel = channel_name not in self.channels
        members = self.channels.setdefault(channel_name, set())
        members.add(connection)
        connection.attach(channel_name)

        if self.reporter:
            self.reporter.info(
                f"Connection joined: channel={channel_name}, "
                f"conn={connection.id}, new_channel={is_new_channel}, "
                f"channel_members={len(members)}",
                context="ConnectionRegistry",
                verbose_level=2,
            )

        return is_new_channel

    def leave(self, channel_name: str, connection: Connection) -> bool:
        """
        Remove connection from channel (no-op if not a member).

        An emptied channel is dropped from the registry.

        Returns:
            True if the channel became empty
        """
        members = self.channels.get(channel_name)
        connection.detach(channel_name)
        if members is None or connection not in members:
            return False

        members.discard(connection)
        emptied = not members
        if emptied:
            del self.channels[channel_name]

        if self.reporter:
            self.reporter.info(
                f"Connection left: channel={channel_name}, "
                f"conn={connection.id}, channel_members={len(members)}, "
                f"emptied={emptied}",
                context="ConnectionRegistry",
                verbose_level=2,
            )

        return emptied

    def leave_all(self, connection: Connection) -> List[LeaveResult]:
        """
        Remove connection from every channel it belongs to.

        Returns:
            One LeaveResult per channel the connection was a member of
        """
        results = []
        for channel_name in sorted(connection.channels):
            is_member = connection in self.channels.get(channel_name, ())
            emptied = self.leave(channel_name, connection)
            if is_member:
                results.append(LeaveResult(channel=channel_name, emptied=emptied))
        return results

    def list_members(self, channel_name: str) -> List[Connection]:
        """Get a snapshot of a channel's members (empty if unknown)."""
        return list(self.channels.get(channel_name, ()))

    def is_member(self, channel_name: str, connection: Connection) -> bool:
        """Check if connection is a member of channel."""
        return connection in self.channels.get(channel_name, ())

    def get_member_count(self, channel_name: str) -> int:
        """Get member count for specific channel."""
        return len(self.channels.get(channel_name, ()))

    def get_total_connections(self) -> int:
        """Get number of distinct joined connections."""
        distinct: Set[Connection] = set()
        for members in self.channels.values():
            distinct.update(members)
        return len(distinct)
