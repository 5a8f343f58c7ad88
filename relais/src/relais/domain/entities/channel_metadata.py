"""
ChannelMetadata entity - descriptive state of a channel.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds and a Z suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class ChannelMetadata:
    """
    Descriptive, non-membership state of a channel.

    ``client_count`` is owned by the metadata store and always mirrors
    the live size of the channel's member set.

    Attributes:
        name: Channel name
        document_name: Optional document identifier shared by members
        connected_at: Channel creation timestamp (set once)
        client_count: Current number of members
    """

    def __init__(
        self,
        name: str,
        document_name: Optional[str] = None,
        connected_at: Optional[datetime] = None,
        client_count: int = 0,
    ):
        """
        Initialize ChannelMetadata.

        Args:
            name: Channel name
            document_name: Optional document identifier
            connected_at: Optional creation timestamp (now if omitted)
            client_count: Initial member count
        """
        self.name: str = name
        self.document_name: Optional[str] = document_name
        self.connected_at: datetime = connected_at or datetime.now(timezone.utc)
        self.client_count: int = client_count

    def to_snapshot(self) -> Dict[str, Any]:
        """
        Wire representation used by ``channels_list``.

        ``documentName`` is left out when the channel has none.
        """
        snapshot: Dict[str, Any] = {"channel": self.name}
        if self.document_name:
            snapshot["documentName"] = self.document_name
        snapshot["connectedAt"] = format_timestamp(self.connected_at)
        snapshot["clientCount"] = self.client_count
        return snapshot

    def __repr__(self) -> str:
        return (
            f"ChannelMetadata(name={self.name!r}, "
            f"document={self.document_name!r}, clients={self.client_count})"
        )
