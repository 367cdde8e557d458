"""Twitter client using the credentialed v2 API."""

import logging
from typing import Any

import aiohttp
import tweepy
from tweepy.asynchronous import AsyncClient

from crossrelay.config import TwitterConfig
from crossrelay.domain.entities import Platform
from crossrelay.domain.exceptions import AdapterError

logger = logging.getLogger(__name__)


class TwitterApiClient:
    """TwitterClient implementation on tweepy with OAuth 1.0a user context."""

    def __init__(
        self,
        config: TwitterConfig,
        *,
        client: AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Twitter settings (API credentials).
            client: tweepy AsyncClient override (tests).
        """
        self._client = client or AsyncClient(
            consumer_key=config.api_key,
            consumer_secret=config.api_key_secret,
            access_token=config.access_token,
            access_token_secret=config.access_token_secret,
        )

    async def post_tweet(self, text: str) -> dict[str, Any]:
        """Post a tweet.

        Args:
            text: Tweet content.

        Returns:
            {"data": <created tweet>}.

        Raises:
            AdapterError: If the API rejects the call or is unreachable.
        """
        try:
            response = await self._client.create_tweet(text=text)
        except tweepy.HTTPException as e:
            status = getattr(e.response, "status", None)
            logger.error("Tweet failed: status=%s, errors=%s", status, e.api_messages)
            raise AdapterError(
                Platform.TWITTER.value, f"Tweet failed: {e}", status_code=status
            ) from e
        except (tweepy.TweepyException, aiohttp.ClientError) as e:
            logger.error("Error sending tweet: %s", e)
            raise AdapterError(Platform.TWITTER.value, str(e)) from e

        data: dict[str, Any] = dict(response.data or {})
        logger.info("Posted tweet: %s", data.get("id"))
        return {"data": data}
