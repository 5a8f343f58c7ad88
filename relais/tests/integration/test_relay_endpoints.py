"""
Integration tests for the Relais HTTP and WebSocket surface.

Runs the full FastAPI application in-process through TestClient.

Usage:
    pytest relais/tests/integration/test_relay_endpoints.py
"""

from fastapi.testclient import TestClient
from shared.tests import LaborantTest

from relais.application.use_cases.message_router import (
    USER_JOINED_MESSAGE,
    USER_LEFT_MESSAGE,
    WELCOME_MESSAGE,
)
from relais.config.settings import Settings
from relais.main import RelaisApp


class TestRelayEndpoints(LaborantTest):
    """Integration tests for Relais endpoints."""

    component_name = "relais"
    test_category = "integration"

    def setup_test(self):
        """Create a fresh application and TestClient per test."""
        self.relais = RelaisApp(Settings(ENV="test", verbose=0))
        self.client = TestClient(self.relais.app)
        self.client.__enter__()

    def teardown_test(self):
        self.client.__exit__(None, None, None)

    def _connect(self):
        ws = self.client.websocket_connect("/")
        session = ws.__enter__()
        welcome = session.receive_json()
        assert welcome == {"type": "system", "message": WELCOME_MESSAGE}
        return ws, session

    def _join(self, session, channel, **extra):
        session.send_json({"type": "join", "channel": channel, **extra})
        joined = session.receive_json()
        ack = session.receive_json()
        return joined, ack

    # ================================================================
    # HTTP
    # ================================================================

    def test_root_banner(self):
        """Plain GET on the root answers with a banner."""
        self.reporter.info("Testing root banner", context="Test")

        response = self.client.get("/")

        assert response.status_code == 200
        assert response.text == "WebSocket server running"

    def test_health_endpoints(self):
        """Health probes report healthy on an idle relay."""
        for path in ["/health", "/health/live", "/health/ready"]:
            response = self.client.get(path)
            assert response.status_code == 200
            assert response.json()["status"] == "healthy"

    def test_cors_preflight(self):
        """Any origin may call the HTTP endpoints."""
        response = self.client.options(
            "/health",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_stats_idle(self):
        response = self.client.get("/stats")
        data = response.json()

        assert response.status_code == 200
        assert data["active_channels"] == 0
        assert data["channels"] == []
        assert data["uptime_seconds"] >= 0

    # ================================================================
    # WebSocket protocol
    # ================================================================

    def test_join_and_broadcast(self):
        """Two clients join a channel and exchange a message."""
        self.reporter.info("Testing join and broadcast over WebSocket", context="Test")

        ws1, c1 = self._connect()
        ws2, c2 = self._connect()

        joined, ack = self._join(c1, "alpha", id=1)
        assert joined == {
            "type": "system",
            "message": "Joined channel: alpha",
            "channel": "alpha",
        }
        assert ack["message"] == {"id": 1, "result": "Connected to channel: alpha"}

        self._join(c2, "alpha")
        assert c1.receive_json() == {
            "type": "system",
            "message": USER_JOINED_MESSAGE,
            "channel": "alpha",
        }

        c1.send_json({"type": "message", "channel": "alpha", "message": "hi"})

        assert c1.receive_json()["sender"] == "You"
        assert c2.receive_json() == {
            "type": "broadcast",
            "message": "hi",
            "sender": "User",
            "channel": "alpha",
        }

        ws2.__exit__(None, None, None)
        assert c1.receive_json() == {
            "type": "system",
            "message": USER_LEFT_MESSAGE,
            "channel": "alpha",
        }

        c1.send_json({"type": "list_channels"})
        listing = c1.receive_json()
        assert listing["type"] == "channels_list"
        assert listing["channels"][0]["clientCount"] == 1

        ws1.__exit__(None, None, None)

    def test_message_before_join(self):
        """Non-members receive an error."""
        ws, session = self._connect()

        session.send_json({"type": "message", "channel": "alpha", "message": "hi"})

        assert session.receive_json() == {
            "type": "error",
            "message": "You must join the channel first",
        }
        ws.__exit__(None, None, None)

    def test_malformed_frames_dropped(self):
        """Undecodable frames get no reply and do not close the socket."""
        self.reporter.info("Testing malformed frames", context="Test")

        ws, session = self._connect()

        session.send_text("{not json")
        session.send_text("[1, 2, 3]")
        session.send_json({"type": "unknown"})
        session.send_bytes(b'{"type": "list_channels"}')

        assert session.receive_json() == {"type": "channels_list", "channels": []}
        assert self.relais.container.stats["decode_failures"] == 2

        ws.__exit__(None, None, None)

    def test_empty_channel_removed_after_disconnect(self):
        """Stats no longer show a channel once its last member leaves."""
        ws, session = self._connect()
        self._join(session, "beta", documentName="Roadmap")

        stats = self.client.get("/stats").json()
        assert stats["active_channels"] == 1
        assert stats["channels"][0]["documentName"] == "Roadmap"

        ws.__exit__(None, None, None)

        stats = self.client.get("/stats").json()
        assert stats["active_channels"] == 0
        assert stats["total_connections"] == 1
