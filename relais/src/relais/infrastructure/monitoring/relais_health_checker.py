"""
Relais Health Checker implementation.

Implements HealthChecker protocol from shared.health.
"""

import time
from datetime import datetime, timezone

from shared.health import HealthCheck, HealthChecker, HealthReport, HealthStatus

from relais.application.use_cases import MessageRouter
from relais.config.settings import Settings


class RelaisHealthChecker(HealthChecker):
    """
    Health checker for the relay.

    Checks:
    - Service liveness (basic check)
    - Channel state consistency (registry vs metadata)
    """

    def __init__(self, settings: Settings, router: MessageRouter):
        """
        Initialize health checker.

        Args:
            settings: Relais settings
            router: Message router owning the live channel state
        """
        self.settings = settings
        self.router = router

    def check_liveness(self) -> HealthReport:
        """
        Liveness probe - is the service alive?

        Returns:
            HealthReport with liveness status
        """
        now = datetime.now(timezone.utc)
        checks = {
            "service": HealthCheck(
                name="relais",
                status=HealthStatus.HEALTHY,
                message="Service is alive",
                timestamp=now,
            )
        }

        return HealthReport(
            status=HealthStatus.HEALTHY,
            checks=checks,
            version=self.settings.APP_VERSION,
            timestamp=now,
        )

    def check_readiness(self) -> HealthReport:
        """
        Readiness probe - is the relay state sound?

        A registry/metadata mismatch degrades the service; it keeps
        taking traffic.

        Returns:
            HealthReport with readiness status
        """
        check = self._check_channel_state()

        return HealthReport(
            status=check.status,
            checks={"channel_state": check},
            version=self.settings.APP_VERSION,
            timestamp=datetime.now(timezone.utc),
        )

    def _check_channel_state(self) -> HealthCheck:
        """Check that every channel's metadata mirrors its membership."""
        start = time.time()
        violations = self.router.check_consistency()
        active_channels = self.router.channel_count()
        metadata = {
            "active_channels": active_channels,
            "total_connections": self.router.total_connections(),
        }

        if violations:
            metadata["violations"] = violations
            return HealthCheck(
                name="channel_state",
                status=HealthStatus.DEGRADED,
                message=f"{len(violations)} channel state violation(s)",
                duration=time.time() - start,
                timestamp=datetime.now(timezone.utc),
                metadata=metadata,
            )

        return HealthCheck(
            name="channel_state",
            status=HealthStatus.HEALTHY,
            message=f"Operational ({active_channels} active channels)",
            duration=time.time() - start,
            timestamp=datetime.now(timezone.utc),
            metadata=metadata,
        )
