"""
Channel-related exceptions.

The message of each exception is what the offending client receives in
its ``error`` envelope.
"""


class ChannelError(Exception):
    """Base exception for channel protocol errors."""

    pass


class InvalidChannelNameError(ChannelError):
    """Raised when a channel name is missing or not a non-empty string."""

    def __init__(self, channel_name=None):
        """
        Initialize InvalidChannelNameError.

        Args:
            channel_name: The rejected value (any type)
        """
        super().__init__("Channel name is required")
        self.channel_name = channel_name


class NotChannelMemberError(ChannelError):
    """Raised when a connection publishes to a channel it has not joined."""

    def __init__(self, channel_name: str, connection_id: str = None):
        """
        Initialize NotChannelMemberError.

        Args:
            channel_name: Target channel
            connection_id: Offending connection
        """
        super().__init__("You must join the channel first")
        self.channel_name = channel_name
        self.connection_id = connection_id
