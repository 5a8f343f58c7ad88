"""
Statistics API routes.
Provides operational metrics about the relay.
"""

from fastapi import APIRouter, Depends

from relais.di import Container
from relais.presentation.api.dependencies import get_container
from relais.presentation.schemas import StatsResponse

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
def get_stats(container: Container = Depends(get_container)):
    """
    Get relay statistics.

    Returns:
        Counters since start plus a snapshot of live channels
    """
    channels = container.message_router.list_channels()

    return StatsResponse(
        uptime_seconds=container.get_uptime_seconds(),
        total_connections=container.stats["total_connections"],
        total_messages_received=container.stats["total_messages_received"],
        decode_failures=container.stats["decode_failures"],
        joined_connections=container.message_router.total_connections(),
        active_channels=len(channels),
        channels=channels,
    )
