"""Twitter integration."""

from crossrelay.infrastructure.twitter.api_client import TwitterApiClient
from crossrelay.infrastructure.twitter.browser_client import (
    SessionCookies,
    TwitterBrowserClient,
    parse_session_cookies,
)
from crossrelay.infrastructure.twitter.factory import (
    create_twitter_client,
    is_twitter_enabled,
)

__all__ = [
    "SessionCookies",
    "TwitterApiClient",
    "TwitterBrowserClient",
    "create_twitter_client",
    "is_twitter_enabled",
    "parse_session_cookies",
]
