"""HTTP server."""

from crossrelay.infrastructure.http.webhook_server import WebhookServer

__all__ = ["WebhookServer"]
