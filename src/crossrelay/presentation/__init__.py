"""Presentation layer."""

from crossrelay.presentation.webhook_handlers import WebhookHandlers

__all__ = ["WebhookHandlers"]
