"""
Unit tests for the dependency injection container.

Usage:
    pytest relais/tests/unit/test_container.py
"""

from shared.tests import LaborantTest

from relais.config.settings import Settings
from relais.di import Container


class TestContainer(LaborantTest):
    """Unit tests for Container."""

    component_name = "relais"
    test_category = "unit"

    def setup_test(self):
        self.container = Container(Settings(verbose=0), reporter=self.reporter)

    def test_singletons(self):
        """Channel state components are created once."""
        self.reporter.info("Testing container singletons", context="Test")

        assert self.container.connection_registry is self.container.connection_registry
        assert self.container.metadata_store is self.container.metadata_store
        assert self.container.message_router is self.container.message_router
        assert (
            self.container.get_validate_message_use_case()
            is self.container.get_validate_message_use_case()
        )

    def test_router_shares_state(self):
        """Router works on the container's registry and store."""
        router = self.container.message_router

        assert router.registry is self.container.connection_registry
        assert router.metadata_store is self.container.metadata_store

    def test_validator_uses_settings(self):
        container = Container(Settings(max_message_size=4096))
        assert container.get_validate_message_use_case().max_message_size == 4096

    def test_stats(self):
        """Known counters increment; unknown names are ignored."""
        self.container.increment_stat("total_connections")
        self.container.increment_stat("decode_failures", 3)
        self.container.increment_stat("unknown")

        assert self.container.stats["total_connections"] == 1
        assert self.container.stats["decode_failures"] == 3
        assert "unknown" not in self.container.stats
        assert self.container.get_uptime_seconds() >= 0
