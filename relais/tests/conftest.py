"""
Shared fixtures for Relais tests.
"""

from typing import Any, Dict, List, Optional

import pytest

from relais.domain.entities import Connection


class RecordingSink:
    """In-memory MessageSink that keeps every payload it is handed."""

    def __init__(self, is_open: bool = True):
        self.is_open = is_open
        self.sent: List[Dict[str, Any]] = []

    def send(self, payload: Dict[str, Any]) -> None:
        self.sent.append(payload)

    def of_type(self, message_type: str) -> List[Dict[str, Any]]:
        return [p for p in self.sent if p.get("type") == message_type]

    def clear(self) -> None:
        self.sent.clear()


class FailingSink(RecordingSink):
    """Sink whose send always raises."""

    def send(self, payload: Dict[str, Any]) -> None:
        raise RuntimeError("peer gone")


@pytest.fixture
def make_connection():
    """Factory for connections backed by a RecordingSink."""

    def _make(connection_id: Optional[str] = None, sink=None) -> Connection:
        return Connection(sink or RecordingSink(), connection_id=connection_id)

    return _make


@pytest.fixture
def make_sink():
    """Factory for RecordingSink instances."""

    def _make(is_open: bool = True) -> RecordingSink:
        return RecordingSink(is_open=is_open)

    return _make


@pytest.fixture
def failing_sink() -> FailingSink:
    """Sink that raises on every send."""
    return FailingSink()
