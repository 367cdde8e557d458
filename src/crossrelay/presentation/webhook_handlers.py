"""Inbound webhook handlers."""

import json
import logging
from collections.abc import Callable
from typing import Any

from aiohttp import web

from crossrelay.domain.entities import Message
from crossrelay.domain.exceptions import MessageValidationError
from crossrelay.infrastructure.telegram import SECRET_TOKEN_HEADER
from crossrelay.runtime import RuntimeState

logger = logging.getLogger(__name__)


async def _read_json(request: web.Request) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    Raises:
        web.HTTPBadRequest: If the body is not a JSON object.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Malformed webhook body on %s: %s", request.path, e)
        raise web.HTTPBadRequest(text="invalid json") from e
    if not isinstance(payload, dict):
        raise web.HTTPBadRequest(text="invalid payload")
    return payload


class WebhookHandlers:
    """Telegram and Farcaster webhook endpoints.

    A request captures the runtime state once and uses it until it returns.
    Once the payload has been validated the webhook is acknowledged with 200,
    even when processing fails afterwards; the failure is only logged.
    """

    def __init__(self, state_provider: Callable[[], RuntimeState]) -> None:
        """Initialize the handlers.

        Args:
            state_provider: Returns the current runtime state.
        """
        self._state_provider = state_provider

    def routes(self) -> list[web.RouteDef]:
        """Route definitions for the webhook endpoints."""
        return [
            web.post("/telegram", self.handle_telegram),
            web.post("/farcaster", self.handle_farcaster),
        ]

    async def handle_telegram(self, request: web.Request) -> web.Response:
        """Handle a Telegram update."""
        state = self._state_provider()
        telegram = state.telegram
        if telegram is None:
            logger.warning("Telegram webhook received while disabled")
            raise web.HTTPBadRequest(text="telegram disabled")

        if not telegram.verify_webhook(request.headers.get(SECRET_TOKEN_HEADER)):
            logger.warning("Telegram webhook secret mismatch")
            raise web.HTTPUnauthorized(text="invalid secret token")

        payload = await _read_json(request)
        try:
            message = telegram.convert_update(payload)
        except MessageValidationError as e:
            logger.warning("Invalid Telegram update: %s", e)
            raise web.HTTPBadRequest(text="invalid update") from e

        if message is None:
            return web.json_response({"ok": True, "handled": False})

        await self._process(state, message)
        return web.json_response({"ok": True, "handled": True})

    async def handle_farcaster(self, request: web.Request) -> web.Response:
        """Handle a Neynar cast webhook."""
        state = self._state_provider()
        farcaster = state.farcaster
        if farcaster is None:
            logger.warning("Farcaster webhook received while disabled")
            raise web.HTTPBadRequest(text="farcaster disabled")

        payload = await _read_json(request)
        try:
            message = farcaster.convert_webhook(payload)
        except MessageValidationError as e:
            logger.warning("Invalid Farcaster webhook: %s", e)
            raise web.HTTPBadRequest(text="invalid webhook") from e

        if message is None:
            return web.json_response({"ok": True, "handled": False})

        if farcaster.is_own_message(message):
            logger.debug("Ignoring own cast: %s", message.hash)
            return web.json_response({"ok": True, "handled": False})

        await self._process(state, message)
        return web.json_response({"ok": True, "handled": True})

    async def _process(self, state: RuntimeState, message: Message) -> None:
        try:
            await state.orchestrator.process_message(message)
        except Exception:
            logger.exception(
                "Failed to process %s message: %s",
                message.platform.value,
                message.id,
            )
