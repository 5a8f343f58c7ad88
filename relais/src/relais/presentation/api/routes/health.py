"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from relais.di import Container
from relais.infrastructure.monitoring import RelaisHealthChecker
from relais.presentation.api.dependencies import get_container

router = APIRouter(tags=["health"])


def get_health_checker(container: Container = Depends(get_container)):
    """Dependency for health checker."""
    return container.get_health_checker()


@router.get("/", response_class=PlainTextResponse)
def root():
    """Plain banner for non-WebSocket requests."""
    return "WebSocket server running"


@router.get("/health/live", status_code=status.HTTP_200_OK)
def liveness_probe(
    response: Response,
    health_checker: RelaisHealthChecker = Depends(get_health_checker),
):
    """
    Liveness probe endpoint.

    Returns 200 if service is alive, 503 if dead.
    """
    report = health_checker.check_liveness()

    if not report.is_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return report.to_dict()


@router.get("/health/ready", status_code=status.HTTP_200_OK)
def readiness_probe(
    response: Response,
    health_checker: RelaisHealthChecker = Depends(get_health_checker),
):
    """
    Readiness probe endpoint.

    Returns 200 if ready (healthy or degraded), 503 if not ready.

    Checks:
    - Registry and metadata store agree on every channel
    """
    report = health_checker.check_readiness()

    if not report.is_ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return report.to_dict()


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check_endpoint(
    response: Response,
    health_checker: RelaisHealthChecker = Depends(get_health_checker),
):
    """General health check endpoint (alias for readiness)."""
    return readiness_probe(response, health_checker)
