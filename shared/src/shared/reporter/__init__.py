"""
Centralized logging for Relais services.
"""

from shared.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
