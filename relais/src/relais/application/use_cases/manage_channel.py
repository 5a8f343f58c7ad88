"""
Use case for managing channel membership.
"""

from typing import List, Optional

from relais.domain.entities import ChannelMetadata, Connection
from relais.infrastructure.registry import (
    ChannelMetadataStore,
    ConnectionRegistry,
    LeaveResult,
)


class ManageChannelUseCase:
    """
    Use case for channel lifecycle management.

    Keeps the connection registry and metadata store paired: a channel
    exists in one iff it exists in the other, and its client_count is
    the live member count.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        metadata_store: ChannelMetadataStore,
    ):
        """
        Initialize use case.

        Args:
            registry: Channel membership
            metadata_store: Channel descriptive state
        """
        self.registry = registry
        self.metadata_store = metadata_store

    def join(
        self,
        connection: Connection,
        channel_name: str,
        document_name: Optional[str] = None,
    ) -> ChannelMetadata:
        """
        Add connection to channel, creating the channel on first join.

        Args:
            connection: Joining connection
            channel_name: Validated channel name
            document_name: Optional document identifier

        Returns:
            The channel's metadata after the join
        """
        self.registry.join(channel_name, connection)
        metadata = self.metadata_store.ensure(channel_name, document_name)
        self.metadata_store.set_count(
            channel_name, self.registry.get_member_count(channel_name)
        )
        return metadata

    def leave_all(self, connection: Connection) -> List[LeaveResult]:
        """
        Remove connection from all its channels.

        Emptied channels lose their metadata; the rest are recounted.

        Returns:
            One LeaveResult per channel the connection left
        """
        results = self.registry.leave_all(connection)

        for result in results:
            if result.emptied:
                self.metadata_store.remove(result.channel)
            else:
                self.metadata_store.set_count(
                    result.channel,
                    self.registry.get_member_count(result.channel),
                )

        return results

    def check_consistency(self) -> List[str]:
        """
        Verify the registry/metadata invariants.

        Returns:
            Human readable violations (empty when consistent)
        """
        violations = []
        registry_channels = set(self.registry.channels)
        metadata_channels = set(self.metadata_store.records)

        for name in sorted(registry_channels - metadata_channels):
            violations.append(f"Channel '{name}' has members but no metadata")

        for name in sorted(metadata_channels - registry_channels):
            violations.append(f"Channel '{name}' has metadata but no members")

        for name in sorted(registry_channels & metadata_channels):
            live = self.registry.get_member_count(name)
            recorded = self.metadata_store.get(name).client_count
            if live != recorded:
                violations.append(
                    f"Channel '{name}' client_count={recorded} "
                    f"but has {live} members"
                )

        return violations
