"""
Monitoring infrastructure for Relais.
"""

from relais.infrastructure.monitoring.relais_health_checker import (
    RelaisHealthChecker,
)

__all__ = ["RelaisHealthChecker"]
