"""
Data Transfer Objects for Relais application layer.
"""

from relais.application.dto.envelopes import (
    BroadcastEnvelope,
    ChannelSnapshot,
    ChannelsListEnvelope,
    Envelope,
    ErrorEnvelope,
    JoinAck,
    SystemEnvelope,
)

__all__ = [
    "BroadcastEnvelope",
    "ChannelSnapshot",
    "ChannelsListEnvelope",
    "Envelope",
    "ErrorEnvelope",
    "JoinAck",
    "SystemEnvelope",
]
