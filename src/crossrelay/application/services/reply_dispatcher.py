"""Platform reply routing."""

import logging
from typing import Any

from crossrelay.config import ConfigError
from crossrelay.domain.entities import Message, Platform
from crossrelay.domain.exceptions import AdapterError
from crossrelay.domain.services import CastPublisher, TelegramSender, TwitterClient

logger = logging.getLogger(__name__)


class PlatformReplyDispatcher:
    """ReplyDispatcher implementation over the configured platform clients.

    A reply that cannot be routed is an error, never a silent drop.
    """

    def __init__(
        self,
        telegram: TelegramSender | None = None,
        farcaster: CastPublisher | None = None,
        twitter: TwitterClient | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            telegram: Telegram client, None if Telegram is disabled.
            farcaster: Farcaster client, None if Farcaster is disabled.
            twitter: Twitter client, None if Twitter is disabled.
        """
        self._telegram = telegram
        self._farcaster = farcaster
        self._twitter = twitter

    async def dispatch(
        self,
        text: str,
        message: Message,
        embeds: tuple[Any, ...] = (),
    ) -> None:
        """Send a reply on the platform the message came from.

        Args:
            text: Reply text.
            message: Message being answered.
            embeds: Attachments (Farcaster only).

        Raises:
            ConfigError: If the platform's client is not configured.
            AdapterError: If a routing field is missing, the platform is
                unknown, or the platform rejects the reply.
        """
        platform = message.platform
        if platform == Platform.TELEGRAM:
            if self._telegram is None:
                raise ConfigError("Telegram client not configured")
            if message.author.chat_id is None:
                raise AdapterError(
                    Platform.TELEGRAM.value,
                    f"Message {message.id} has no chat id to reply to",
                )
            await self._telegram.send_message(message.author.chat_id, text)
        elif platform == Platform.FARCASTER:
            if self._farcaster is None:
                raise ConfigError("Farcaster client not configured")
            if not message.hash:
                raise AdapterError(
                    Platform.FARCASTER.value,
                    f"Message {message.id} has no cast hash to reply to",
                )
            logger.info("Replying to Farcaster cast: parent_hash=%s", message.hash)
            await self._farcaster.publish_cast(
                text, message.hash, list(embeds) if embeds else None
            )
        elif platform == Platform.TWITTER:
            if self._twitter is None:
                raise ConfigError("Twitter client not configured")
            await self._twitter.post_tweet(text)
        else:
            raise AdapterError(str(platform), f"Unknown platform: {platform}")
