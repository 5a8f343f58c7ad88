"""
Domain entities for Relais.
"""

from relais.domain.entities.channel_metadata import ChannelMetadata
from relais.domain.entities.connection import (
    Connection,
    ConnectionState,
    MessageSink,
)

__all__ = ["ChannelMetadata", "Connection", "ConnectionState", "MessageSink"]
