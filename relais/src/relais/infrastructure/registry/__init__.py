"""
In-memory channel state for Relais.
"""

from relais.infrastructure.registry.connection_registry import (
    ConnectionRegistry,
    LeaveResult,
)
from relais.infrastructure.registry.metadata_store import ChannelMetadataStore

__all__ = ["ChannelMetadataStore", "ConnectionRegistry", "LeaveResult"]
