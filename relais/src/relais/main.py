"""
Relais - WebSocket Channel Relay

Orchestrates Clean Architecture components to relay JSON messages
between clients that joined the same named channel.
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.reporter import SystemReporter

from relais.config.settings import Settings, load_config
from relais.di import Container
from relais.presentation.api.dependencies import set_container
from relais.presentation.api.routes import (
    health_router,
    stats_router,
    websocket_router,
)


class RelaisApp:
    """
    Relais application orchestrator.

    Thin coordination layer that initializes and connects
    all Clean Architecture components.

    Responsibilities:
        - Initialize DI container
        - Setup FastAPI application with CORS
        - Register API routes
        - Log application lifecycle
        - Run uvicorn server
    """

    def __init__(self, settings: Settings):
        """
        Initialize Relais application.

        Args:
            settings: Application settings
        """
        self.settings = settings

        # Reporter first, every component logs through it
        self.reporter = self._create_reporter()

        self.container = Container(settings, reporter=self.reporter)

        self.app = self._create_app()

        # Global container for FastAPI dependencies
        set_container(self.container)

        # Server instance (set during serve)
        self.server: Optional[uvicorn.Server] = None

        self.reporter.info(
            "Relais initialized",
            context="Relais",
            verbose_level=1,
        )

    def _create_reporter(self) -> SystemReporter:
        """
        Create SystemReporter instance.

        Returns:
            Configured SystemReporter
        """
        log_dir = None

        if self.settings.log_file:
            log_dir = os.path.dirname(self.settings.log_file)
            if not log_dir:
                log_dir = "logs"

        return SystemReporter(
            name="relais",
            log_dir=log_dir,
            level=getattr(logging, self.settings.log_level.upper()),
            verbose=self.settings.verbose,
        )

    def _create_app(self) -> FastAPI:
        """
        Create FastAPI application with lifespan management.

        Returns:
            Configured FastAPI application
        """

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            """Application lifespan context manager."""
            await self._on_startup()

            yield

            await self._on_shutdown()

        app = FastAPI(
            title=self.settings.APP_NAME,
            description="WebSocket channel relay",
            version=self.settings.APP_VERSION,
            lifespan=lifespan,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.cors_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

        app.include_router(websocket_router)
        app.include_router(health_router)
        app.include_router(stats_router)

        return app

    async def _on_startup(self):
        """Application startup event handler."""
        self.reporter.info(
            "Relais starting...",
            context="Relais",
            verbose_level=1,
        )

        self.reporter.info(
            f"WebSocket server running on port {self.settings.port}",
            context="Relais",
            verbose_level=0,
        )

        self.reporter.info(
            f"Host: {self.settings.host}:{self.settings.port} "
            f"[env={self.settings.ENV}]",
            context="Relais",
            verbose_level=1,
        )

    async def _on_shutdown(self):
        """
        Application shutdown event handler.

        Logs remaining channel state; open sockets are closed by uvicorn
        and each closes through the router's on_close.
        """
        self.reporter.info(
            "Relais shutting down...",
            context="Relais",
            verbose_level=1,
        )

        remaining = self.container.message_router.total_connections()
        if remaining:
            self.reporter.info(
                f"{remaining} joined connections at shutdown",
                context="Relais",
                verbose_level=1,
            )

        self.reporter.info(
            "Relais stopped",
            context="Relais",
            verbose_level=1,
        )

    async def serve(self):
        """
        Run server with proper signal handling.

        Uses uvicorn.Server API for shutdown control.
        """
        config = uvicorn.Config(
            self.app,
            host=self.settings.host,
            port=self.settings.port,
            log_level=self.settings.log_level,
        )
        self.server = uvicorn.Server(config)
        await self.server.serve()

    def start(self):
        """
        Start Relais server.

        Blocks until server is stopped.
        """
        asyncio.run(self.serve())


def main():
    """
    Main entry point for Relais application.

    Loads configuration and starts the server. An optional first
    argument overrides the listening port.
    """
    import sys

    config = load_config()

    if len(sys.argv) > 1:
        try:
            config.port = int(sys.argv[1])
        except ValueError:
            print(f"Invalid port: {sys.argv[1]}")
            sys.exit(1)

    app = RelaisApp(config)

    try:
        app.start()
    except KeyboardInterrupt:
        print("\nRelais stopped by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
