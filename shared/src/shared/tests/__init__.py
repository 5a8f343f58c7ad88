"""
Shared testing utilities for Relais components.

All tests MUST inherit from LaborantTest.
"""

from shared.tests.test_base import LaborantTest

__all__ = ["LaborantTest"]
