"""
Domain exceptions for Relais.
"""

from relais.domain.exceptions.channel_exceptions import (
    ChannelError,
    InvalidChannelNameError,
    NotChannelMemberError,
)

__all__ = [
    "ChannelError",
    "InvalidChannelNameError",
    "NotChannelMemberError",
]
