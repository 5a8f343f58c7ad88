"""
API routes for Relais.
"""

from relais.presentation.api.routes.health import router as health_router
from relais.presentation.api.routes.stats import router as stats_router
from relais.presentation.api.routes.websocket import router as websocket_router

__all__ = ["health_router", "stats_router", "websocket_router"]
