"""
API schemas for Relais.
"""

from relais.presentation.schemas.stats import StatsResponse

__all__ = ["StatsResponse"]
