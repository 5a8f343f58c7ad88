"""
Dependency injection for Relais.
"""

from relais.di.container import Container

__all__ = ["Container"]
