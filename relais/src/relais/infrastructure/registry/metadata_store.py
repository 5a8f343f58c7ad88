"""
In-memory channel metadata store.
"""

from typing import Any, Dict, List, Optional

from shared.reporter import SystemReporter

from relais.domain.entities import ChannelMetadata


class ChannelMetadataStore:
    """
    Descriptive state per channel.

    Records are created and removed in lockstep with the connection
    registry; ``client_count`` is only ever written through set_count.
    """

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.records: Dict[str, ChannelMetadata] = {}
        self.reporter = reporter

    def ensure(
        self, channel_name: str, document_name: Optional[str] = None
    ) -> ChannelMetadata:
        """
        Create a record if none exists, or backfill its document name.

        An existing non-empty document name is never overwritten.

        Args:
            channel_name: Channel name
            document_name: Optional document identifier

        Returns:
            The channel's metadata record
        """
        record = self.records.get(channel_name)

        if record is None:
            record = ChannelMetadata(name=channel_name, document_name=document_name)
            self.records[channel_name] = record

            if self.reporter:
                self.reporter.debug(
                    f"Metadata created: channel={channel_name}, "
                    f"document={document_name}",
                    context="MetadataStore",
                )
        elif document_name and not record.document_name:
            record.document_name = document_name

        return record

    def set_count(self, channel_name: str, count: int) -> None:
        """Set the live member count of a channel."""
        record = self.records.get(channel_name)
        if record is not None:
            record.client_count = count

    def remove(self, channel_name: str) -> None:
        """Delete a channel's record (no-op if absent)."""
        if self.records.pop(channel_name, None) is not None and self.reporter:
            self.reporter.debug(
                f"Metadata removed: channel={channel_name}",
                context="MetadataStore",
            )

    def get(self, channel_name: str) -> Optional[ChannelMetadata]:
        """Get a channel's record."""
        return self.records.get(channel_name)

    def exists(self, channel_name: str) -> bool:
        """Check if a channel has a record."""
        return channel_name in self.records

    def list(self) -> List[Dict[str, Any]]:
        """Snapshot every known channel (order not significant)."""
        return [record.to_snapshot() for record in self.records.values()]
