"""
ChannelName value object - immutable channel name with validation.
"""

from dataclasses import dataclass
from typing import Any

from relais.domain.exceptions import InvalidChannelNameError


@dataclass(frozen=True)
class ChannelName:
    """
    Value object representing a validated channel name.

    Any non-empty string is a valid name. Names are kept verbatim:
    no case folding, no whitespace trimming.

    Examples:
        - alpha
        - figma-doc-42
        - "Team Room"
    """

    name: Any

    def __post_init__(self):
        """Validate channel name on creation."""
        if not isinstance(self.name, str) or not self.name:
            raise InvalidChannelNameError(self.name)

    @property
    def value(self) -> str:
        """Get channel name value."""
        return self.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ChannelName({self.name!r})"
