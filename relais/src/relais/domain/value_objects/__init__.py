"""
Domain value objects for Relais.
"""
from relais.domain.value_objects.channel_name import ChannelName

__all__ = ["ChannelName"]
