"""Farcaster client backed by the Neynar API."""

import logging
import uuid
from typing import Any

import httpx
from pydantic import ValidationError

from crossrelay.config import ConfigError, FarcasterConfig
from crossrelay.domain.entities import Author, Message, Platform
from crossrelay.domain.exceptions import AdapterError, MessageValidationError
from crossrelay.infrastructure.farcaster.models import CastWebhook

logger = logging.getLogger(__name__)

CAST_CREATED = "cast.created"


class FarcasterClient:
    """Farcaster implementation of CastPublisher."""

    def __init__(
        self,
        config: FarcasterConfig,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Farcaster settings.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport (tests).
        """
        self._config = config
        self._timeout = timeout
        self._transport = transport

    @property
    def fid(self) -> str:
        """The agent's own Farcaster ID."""
        return self._config.fid

    async def publish_cast(
        self,
        text: str,
        parent_hash: str | None = None,
        embeds: list[Any] | None = None,
    ) -> dict[str, Any]:
        """Publish a cast, optionally as a reply.

        Args:
            text: Cast content.
            parent_hash: Hash of the cast to reply to. None posts top-level.
            embeds: Attachments passed to Neynar as is.

        Returns:
            Neynar response data.

        Raises:
            ConfigError: If no API key is configured.
            AdapterError: If Neynar rejects the call or is unreachable.
        """
        if not self._config.neynar_api_key:
            raise ConfigError("Missing Farcaster API key")

        logger.info(
            "Publishing cast: parent_hash=%s, has_embeds=%s",
            parent_hash,
            bool(embeds),
        )

        body: dict[str, Any] = {
            "signer_uuid": self._config.signer_uuid,
            "text": text,
            "idem": uuid.uuid4().hex[:16],
        }
        if parent_hash:
            body["parent"] = parent_hash
        if embeds:
            body["embeds"] = embeds

        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "x-api-key": self._config.neynar_api_key,
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.post(
                    f"{self._config.api_base_url}/v2/farcaster/cast",
                    json=body,
                    headers=headers,
                )
        except httpx.RequestError as e:
            logger.error("Error publishing cast: %s", e)
            raise AdapterError(Platform.FARCASTER.value, str(e)) from e

        logger.info("Neynar response status: %d", response.status_code)
        if response.is_error:
            logger.error("Neynar API error response: %s", response.text)
            raise AdapterError(
                Platform.FARCASTER.value,
                f"Neynar API error: {response.status_code}",
                status_code=response.status_code,
            )

        data: dict[str, Any] = response.json()
        logger.debug("Published cast: %s", data)
        return data

    def convert_webhook(self, payload: dict[str, Any]) -> Message | None:
        """Convert a Neynar webhook payload to a Message.

        Args:
            payload: Webhook body.

        Returns:
            Message, or None for non-cast events and empty casts.

        Raises:
            MessageValidationError: If the payload is malformed.
        """
        try:
            webhook = CastWebhook.model_validate(payload)
        except ValidationError as e:
            raise MessageValidationError(Platform.FARCASTER.value, str(e)) from e

        if webhook.type != CAST_CREATED:
            logger.info("Ignoring Farcaster event: %s", webhook.type)
            return None

        cast = webhook.data
        if not cast.text.strip():
            logger.info("Ignoring empty cast: %s", cast.hash)
            return None

        author = cast.author
        return Message(
            id=cast.hash,
            text=cast.text,
            author=Author(
                username=author.username,
                display_name=author.display_name or author.username,
                fid=str(author.fid),
                custody_address=author.custody_address,
                verifications=tuple(author.verifications),
            ),
            timestamp=int(cast.timestamp.timestamp() * 1000),
            platform=Platform.FARCASTER,
            hash=cast.hash,
            thread_hash=cast.thread_hash,
            parent_hash=cast.parent_hash,
            parent_url=cast.parent_url,
            embeds=tuple(cast.embeds),
            raw=payload,
        )

    def is_own_message(self, message: Message) -> bool:
        """Check whether a message was cast by the agent itself."""
        return bool(self._config.fid) and message.author.fid == self._config.fid
