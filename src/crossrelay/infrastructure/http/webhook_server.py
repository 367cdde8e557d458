"""Webhook and health check HTTP server."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from aiohttp import web

if TYPE_CHECKING:
    from crossrelay.infrastructure.events import TriggerLoop
    from crossrelay.infrastructure.persistence import DatabaseManager

logger = logging.getLogger(__name__)


class WebhookServer:
    """HTTP server for inbound webhooks and health checks.

    Serves the given webhook routes plus /live and /ready.
    """

    def __init__(
        self,
        routes: list[web.RouteDef],
        db_manager: DatabaseManager,
        trigger_loop: TriggerLoop | None = None,
        host: str = "0.0.0.0",
        port: int = 8080,
    ) -> None:
        """Initialize the server.

        Args:
            routes: Webhook route definitions.
            db_manager: DatabaseManager instance.
            trigger_loop: TriggerLoop instance, None if scheduling is disabled.
            host: Interface to bind.
            port: Port to listen on. Use 0 for any available port.
        """
        self._routes = routes
        self._db_manager = db_manager
        self._trigger_loop = trigger_loop
        self._host = host
        self._port = port
        self._actual_port = port
        self._server: web.AppRunner | None = None
        self._site: web.TCPSite | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if the server is running."""
        return self._running

    @property
    def port(self) -> int:
        """Get the port the server is listening on."""
        return self._actual_port

    def create_app(self) -> web.Application:
        """Build the aiohttp application."""
        app = web.Application()
        app.router.add_routes(self._routes)
        app.router.add_get("/live", self._handle_live)
        app.router.add_get("/ready", self._handle_ready)
        return app

    async def check_liveness(self) -> dict[str, Any]:
        """Check if the application is alive.

        Returns:
            Liveness status with timestamp.
        """
        return {
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    async def check_readiness(self) -> dict[str, Any]:
        """Check if the application is ready to serve traffic.

        Returns:
            Readiness status with component health details.
        """
        db_ok = await self._db_manager.is_healthy()
        result: dict[str, Any] = {"database": db_ok}
        ready = db_ok

        if self._trigger_loop is not None:
            trigger_ok = self._trigger_loop.is_running
            result["trigger_loop"] = trigger_ok
            ready = ready and trigger_ok

        result["ready"] = ready
        return result

    async def _handle_live(self, request: web.Request) -> web.Response:
        """Handle /live endpoint."""
        result = await self.check_liveness()
        return web.json_response(result)

    async def _handle_ready(self, request: web.Request) -> web.Response:
        """Handle /ready endpoint."""
        result = await self.check_readiness()
        status = 200 if result["ready"] else 503
        return web.json_response(result, status=status)

    async def start(self) -> None:
        """Start the HTTP server."""
        self._server = web.AppRunner(self.create_app())
        await self._server.setup()

        self._site = web.TCPSite(self._server, self._host, self._port)
        await self._site.start()

        # Get actual port (useful when port=0 for dynamic allocation)
        if self._site._server is not None:
            sockets = self._site._server.sockets  # type: ignore[union-attr]
            if sockets:
                self._actual_port = sockets[0].getsockname()[1]

        self._running = True
        logger.info("Webhook server started on %s:%d", self._host, self.port)

    async def stop(self) -> None:
        """Stop the HTTP server."""
        if self._server is not None:
            await self._server.cleanup()
            self._server = None
            self._site = None

        self._running = False
        logger.info("Webhook server stopped")
