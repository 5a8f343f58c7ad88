"""
Unit tests for ChannelMetadata entity.

Usage:
    pytest relais/tests/unit/domain/test_channel_metadata.py
"""

import re
from datetime import datetime, timedelta, timezone

from shared.tests import LaborantTest

from relais.domain.entities import ChannelMetadata
from relais.domain.entities.channel_metadata import format_timestamp

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestChannelMetadata(LaborantTest):
    """Unit tests for ChannelMetadata entity."""

    component_name = "relais"
    test_category = "unit"

    def test_format_timestamp_utc(self):
        """Timestamps render with milliseconds and a Z suffix."""
        self.reporter.info("Testing timestamp format", context="Test")

        value = datetime(2024, 3, 5, 7, 8, 9, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-03-05T07:08:09.123Z"

    def test_format_timestamp_converts_to_utc(self):
        """Offset-aware timestamps are converted to UTC."""
        offset = timezone(timedelta(hours=2))
        value = datetime(2024, 3, 5, 9, 0, 0, 0, tzinfo=offset)

        assert format_timestamp(value) == "2024-03-05T07:00:00.000Z"

    def test_snapshot_with_document(self):
        """Snapshot carries every field when a document name is set."""
        self.reporter.info("Testing snapshot with document", context="Test")

        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        metadata = ChannelMetadata(
            name="alpha",
            document_name="Roadmap",
            connected_at=created,
            client_count=2,
        )

        assert metadata.to_snapshot() == {
            "channel": "alpha",
            "documentName": "Roadmap",
            "connectedAt": "2024-01-01T00:00:00.000Z",
            "clientCount": 2,
        }

    def test_snapshot_without_document(self):
        """documentName is omitted when the channel has none."""
        metadata = ChannelMetadata(name="alpha", client_count=1)
        snapshot = metadata.to_snapshot()

        assert "documentName" not in snapshot
        assert snapshot["channel"] == "alpha"
        assert snapshot["clientCount"] == 1
        assert TIMESTAMP_PATTERN.match(snapshot["connectedAt"])

    def test_defaults(self):
        """New metadata starts empty with a creation time."""
        metadata = ChannelMetadata(name="alpha")

        assert metadata.document_name is None
        assert metadata.client_count == 0
        assert metadata.connected_at.tzinfo is not None
