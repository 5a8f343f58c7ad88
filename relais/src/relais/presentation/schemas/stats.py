"""
Schemas for the statistics endpoint.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    """Operational statistics of the relay."""

    uptime_seconds: float = Field(..., description="Server uptime in seconds")
    total_connections: int = Field(
        ..., description="Total connections since server start"
    )
    total_messages_received: int = Field(
        ..., description="Total frames received since server start"
    )
    decode_failures: int = Field(
        ..., description="Frames dropped because they could not be decoded"
    )
    joined_connections: int = Field(
        ..., description="Connections currently member of at least one channel"
    )
    active_channels: int = Field(..., description="Number of live channels")
    channels: List[Dict[str, Any]] = Field(
        ..., description="Channel snapshots (same shape as channels_list)"
    )
