"""
Dependency Injection container for Relais.

Manages lifecycle and dependencies of all application components.
"""

from datetime import datetime, timezone
from typing import Optional

from shared.reporter import SystemReporter

from relais.application.use_cases import MessageRouter, ValidateMessageUseCase
from relais.config.settings import Settings
from relais.infrastructure.monitoring import RelaisHealthChecker
from relais.infrastructure.registry import ChannelMetadataStore, ConnectionRegistry


class Container:
    """
    Dependency Injection container.

    Creates and manages all application dependencies. The registry,
    metadata store and router are process-wide singletons: all channel
    state lives here.
    """

    def __init__(self, settings: Settings, reporter: Optional[SystemReporter] = None):
        """
        Initialize container with settings.

        Args:
            settings: Application settings
            reporter: Optional SystemReporter shared by all components
        """
        self.settings = settings
        self.reporter = reporter or SystemReporter(
            name="relais", verbose=settings.verbose
        )

        self._connection_registry: Optional[ConnectionRegistry] = None
        self._metadata_store: Optional[ChannelMetadataStore] = None
        self._message_router: Optional[MessageRouter] = None
        self._validate_message_use_case: Optional[ValidateMessageUseCase] = None

        self.stats = {
            "total_connections": 0,
            "total_messages_received": 0,
            "decode_failures": 0,
            "start_time": datetime.now(timezone.utc),
        }

    @property
    def connection_registry(self) -> ConnectionRegistry:
        """Get ConnectionRegistry singleton."""
        if self._connection_registry is None:
            self._connection_registry = ConnectionRegistry(reporter=self.reporter)
        return self._connection_registry

    @property
    def metadata_store(self) -> ChannelMetadataStore:
        """Get ChannelMetadataStore singleton."""
        if self._metadata_store is None:
            self._metadata_store = ChannelMetadataStore(reporter=self.reporter)
        return self._metadata_store

    @property
    def message_router(self) -> MessageRouter:
        """Get MessageRouter singleton."""
        if self._message_router is None:
            self._message_router = MessageRouter(
                registry=self.connection_registry,
                metadata_store=self.metadata_store,
                reporter=self.reporter,
            )
        return self._message_router

    def get_validate_message_use_case(self) -> ValidateMessageUseCase:
        """Get ValidateMessageUseCase singleton."""
        if self._validate_message_use_case is None:
            self._validate_message_use_case = ValidateMessageUseCase(
                max_message_size=self.settings.max_message_size,
            )
        return self._validate_message_use_case

    def get_health_checker(self) -> RelaisHealthChecker:
        """Get a health checker over the live channel state."""
        return RelaisHealthChecker(
            settings=self.settings,
            router=self.message_router,
        )

    def increment_stat(self, stat_name: str, amount: int = 1) -> None:
        """
        Increment a statistic counter.

        Args:
            stat_name: Name of statistic to increment
            amount: Amount to increment by
        """
        if stat_name in self.stats:
            self.stats[stat_name] += amount

    def get_uptime_seconds(self) -> float:
        """Get server uptime in seconds."""
        return (datetime.now(timezone.utc) - self.stats["start_time"]).total_seconds()
