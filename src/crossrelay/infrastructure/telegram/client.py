"""Telegram Bot API client."""

import hmac
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from crossrelay.config import ConfigError, TelegramConfig
from crossrelay.domain.entities import Author, Message, Platform
from crossrelay.domain.exceptions import AdapterError, MessageValidationError
from crossrelay.infrastructure.telegram.models import TelegramUpdate

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


class TelegramClient:
    """Telegram implementation of TelegramSender.

    Translates webhook updates into canonical messages and sends replies
    with the Bot API.
    """

    def __init__(
        self,
        config: TelegramConfig,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Telegram settings.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport (tests).
        """
        self._config = config
        self._timeout = timeout
        self._transport = transport

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send a message to a Telegram chat.

        Args:
            chat_id: Target chat ID.
            text: Message content (HTML parse mode).

        Raises:
            ConfigError: If no bot token is configured.
            AdapterError: If the Bot API rejects the call or is unreachable.
        """
        if not self._config.bot_token:
            raise ConfigError("Telegram bot token not configured")

        url = f"{self._config.api_base_url}/bot{self._config.bot_token}/sendMessage"
        payload = {"chat_id": chat_id, "text": text, "parse_mode": "HTML"}

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.post(url, json=payload)
        except httpx.RequestError as e:
            logger.error("Error sending Telegram message: %s", e)
            raise AdapterError(Platform.TELEGRAM.value, str(e)) from e

        if response.is_error:
            description = _error_description(response)
            logger.error("Failed to send Telegram message: %s", description)
            raise AdapterError(
                Platform.TELEGRAM.value,
                f"Telegram API error: {description}",
                status_code=response.status_code,
            )

        logger.debug("Sent Telegram message: chat_id=%s", chat_id)

    def convert_update(self, update: dict[str, Any]) -> Message | None:
        """Convert a Telegram update to a Message.

        Args:
            update: Webhook update payload.

        Returns:
            Message, or None if the update carries no text message.

        Raises:
            MessageValidationError: If the payload is malformed.
        """
        try:
            parsed = TelegramUpdate.model_validate(update)
        except ValidationError as e:
            raise MessageValidationError(Platform.TELEGRAM.value, str(e)) from e

        tg_message = parsed.message
        if tg_message is None or not tg_message.text or not tg_message.text.strip():
            logger.info("Not a text message: update_id=%s", parsed.update_id)
            return None

        sender = tg_message.from_user
        display_name = f"{sender.first_name} {sender.last_name or ''}".strip()
        reply_to = (
            str(tg_message.reply_to_message.message_id)
            if tg_message.reply_to_message
            else None
        )

        return Message(
            id=str(tg_message.message_id),
            text=tg_message.text,
            author=Author(
                username=sender.username or str(sender.id),
                display_name=display_name,
                chat_id=tg_message.chat.id,
            ),
            timestamp=tg_message.date * 1000,
            platform=Platform.TELEGRAM,
            reply_to=reply_to,
            raw=update,
        )

    def verify_webhook(self, secret_token: str | None) -> bool:
        """Check the webhook secret token header.

        Args:
            secret_token: Value of the secret token header.

        Returns:
            True if no secret is configured or the token matches.
        """
        if not self._config.webhook_secret:
            return True
        if secret_token is None:
            return False
        return hmac.compare_digest(secret_token, self._config.webhook_secret)


def _error_description(response: httpx.Response) -> str:
    """Extract the Bot API error description."""
    try:
        return str(response.json().get("description", response.text))
    except ValueError:
        return response.text
