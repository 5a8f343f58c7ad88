"""
Message validation use case.

Decodes incoming WebSocket frames:
- Size limits
- JSON structure
- Object payloads only
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class ValidationResult:
    """Result of message validation."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    message_type: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None
    size_bytes: int = 0


class ValidateMessageUseCase:
    """
    Use case for decoding inbound WebSocket frames.

    Invalid frames are reported through the result, never raised: the
    endpoint logs and drops them.
    """

    def __init__(self, max_message_size: int = 1_048_576):
        """
        Initialize message validator.

        Args:
            max_message_size: Maximum frame size in bytes
        """
        self.max_message_size = max_message_size

    def validate_message(self, raw_message: Union[str, bytes]) -> ValidationResult:
        """
        Decode one frame.

        Args:
            raw_message: Text or binary frame as received

        Returns:
            ValidationResult with the decoded payload when valid
        """
        if isinstance(raw_message, str):
            data = raw_message.encode("utf-8")
        else:
            data = raw_message

        size_bytes = len(data)
        if size_bytes > self.max_message_size:
            return ValidationResult(
                valid=False,
                errors=[
                    f"Message too large: {size_bytes} bytes "
                    f"(max: {self.max_message_size})"
                ],
                size_bytes=size_bytes,
            )

        try:
            message = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return ValidationResult(
                valid=False,
                errors=[f"Invalid JSON: {str(e)}"],
                size_bytes=size_bytes,
            )

        if not isinstance(message, dict):
            return ValidationResult(
                valid=False,
                errors=["Message must be a JSON object"],
                size_bytes=size_bytes,
            )

        message_type = message.get("type")

        return ValidationResult(
            valid=True,
            message_type=message_type if isinstance(message_type, str) else None,
            payload=message,
            size_bytes=size_bytes,
        )
