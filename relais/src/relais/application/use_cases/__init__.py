"""
Application use cases for Relais.
"""

from relais.application.use_cases.broadcast_message import BroadcastMessageUseCase
from relais.application.use_cases.manage_channel import ManageChannelUseCase
from relais.application.use_cases.message_router import MessageRouter
from relais.application.use_cases.message_validation import (
    ValidateMessageUseCase,
    ValidationResult,
)

__all__ = [
    "BroadcastMessageUseCase",
    "ManageChannelUseCase",
    "MessageRouter",
    "ValidateMessageUseCase",
    "ValidationResult",
]
