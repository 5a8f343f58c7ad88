"""
Relais - WebSocket Channel Relay

Clean Architecture implementation of a channel-scoped message relay.
"""

from relais.main import RelaisApp, main

__version__ = "0.1.0"
__all__ = ["RelaisApp", "main"]
