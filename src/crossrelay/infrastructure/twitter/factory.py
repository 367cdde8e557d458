"""Twitter client selection."""

import logging

import httpx

from crossrelay.config import ConfigError, TwitterConfig
from crossrelay.domain.services import TwitterClient
from crossrelay.infrastructure.twitter.api_client import TwitterApiClient
from crossrelay.infrastructure.twitter.browser_client import TwitterBrowserClient

logger = logging.getLogger(__name__)


def create_twitter_client(
    config: TwitterConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TwitterClient:
    """Create the configured Twitter client.

    The browser-session client takes precedence over the API client.

    Args:
        config: Twitter settings.
        transport: Optional httpx transport for the browser client (tests).

    Returns:
        TwitterClient implementation.

    Raises:
        ConfigError: If neither client is enabled.
    """
    if config.use_browser:
        logger.info("Using Twitter browser client")
        return TwitterBrowserClient(config, transport=transport)

    if config.enabled:
        logger.info("Using Twitter API client")
        return TwitterApiClient(config)

    raise ConfigError(
        "No Twitter client enabled. Set twitter.enabled or twitter.use_browser"
    )


def is_twitter_enabled(config: TwitterConfig) -> bool:
    """Check whether any Twitter client is configured."""
    return config.enabled or config.use_browser
