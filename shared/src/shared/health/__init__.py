"""
Health check primitives shared by Relais services.

Provides Kubernetes-compatible liveness and readiness reports.
"""

from shared.health.checks import (
    HealthChecker,
    HealthStatus,
    HealthCheck,
    HealthReport,
)

__all__ = [
    "HealthChecker",
    "HealthStatus",
    "HealthCheck",
    "HealthReport",
]
