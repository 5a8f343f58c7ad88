"""
Unit tests for ChannelMetadataStore.

Usage:
    pytest relais/tests/unit/infrastructure/test_metadata_store.py
"""

from shared.tests import LaborantTest

from relais.infrastructure.registry import ChannelMetadataStore


class TestChannelMetadataStore(LaborantTest):
    """Unit tests for ChannelMetadataStore."""

    component_name = "relais"
    test_category = "unit"

    def setup_test(self):
        self.store = ChannelMetadataStore(reporter=self.reporter)

    def test_ensure_creates_record(self):
        """ensure creates a record on first use."""
        self.reporter.info("Testing record creation", context="Test")

        record = self.store.ensure("alpha", "Roadmap")

        assert self.store.exists("alpha")
        assert record.name == "alpha"
        assert record.document_name == "Roadmap"
        assert record.client_count == 0

    def test_ensure_returns_existing(self):
        """ensure keeps the first record and its creation time."""
        first = self.store.ensure("alpha")
        second = self.store.ensure("alpha")

        assert first is second
        assert first.connected_at == second.connected_at

    def test_document_name_backfilled(self):
        """A missing document name is filled by a later join."""
        self.reporter.info("Testing document name backfill", context="Test")

        self.store.ensure("alpha")
        self.store.ensure("alpha", "Roadmap")

        assert self.store.get("alpha").document_name == "Roadmap"

    def test_document_name_never_overwritten(self):
        """An existing document name is kept."""
        self.store.ensure("alpha", "Roadmap")
        self.store.ensure("alpha", "Other")

        assert self.store.get("alpha").document_name == "Roadmap"

    def test_set_count(self):
        """set_count updates an existing record and ignores unknown ones."""
        self.store.ensure("alpha")
        self.store.set_count("alpha", 3)
        self.store.set_count("missing", 5)

        assert self.store.get("alpha").client_count == 3
        assert not self.store.exists("missing")

    def test_remove(self):
        """remove deletes a record and tolerates unknown names."""
        self.store.ensure("alpha")
        self.store.remove("alpha")
        self.store.remove("alpha")

        assert self.store.get("alpha") is None

    def test_list_snapshots(self):
        """list returns one snapshot per channel."""
        self.reporter.info("Testing list snapshots", context="Test")

        self.store.ensure("alpha", "Roadmap")
        self.store.ensure("beta")
        self.store.set_count("alpha", 2)

        snapshots = {s["channel"]: s for s in self.store.list()}

        assert set(snapshots) == {"alpha", "beta"}
        assert snapshots["alpha"]["documentName"] == "Roadmap"
        assert snapshots["alpha"]["clientCount"] == 2
        assert "documentName" not in snapshots["beta"]
