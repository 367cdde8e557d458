"""Twitter client emulating a logged-in browser session.

Posts through the web app's GraphQL endpoint using the session cookies of
an existing login, for accounts without API credentials.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from crossrelay.config import ConfigError, TwitterConfig
from crossrelay.domain.entities import Platform
from crossrelay.domain.exceptions import AdapterError

logger = logging.getLogger(__name__)

CREATE_TWEET_URL = (
    "https://twitter.com/i/api/graphql/a1p9RWpkYKBjWv_I3WzS-A/CreateTweet"
)

# Public bearer token of the twitter.com web app.
WEB_BEARER_TOKEN = (
    "AAAAAAAAAAAAAAAAAAAAANRILgAAAAAAnNwIzUejRCOuH5E6I8xnZz4puTs"
    "=1Zv7ttfk8LF81IUq16cHjhLTvJu4FA33AGWWjCpTnA"
)

CREATE_TWEET_FEATURES = {
    "interactive_text_enabled": True,
    "longform_notetweets_inline_media_enabled": False,
    "responsive_web_text_conversations_enabled": False,
    "tweet_with_visibility_results_prefer_gql_limited_actions_policy_enabled": False,
    "vibe_api_enabled": False,
    "rweb_lists_timeline_redesign_enabled": True,
    "responsive_web_graphql_exclude_directive_enabled": True,
    "verified_phone_label_enabled": False,
    "creator_subscriptions_tweet_preview_api_enabled": True,
    "responsive_web_graphql_timeline_navigation_enabled": True,
    "responsive_web_graphql_skip_user_profile_image_extensions_enabled": False,
    "tweetypie_unmention_optimization_enabled": True,
    "responsive_web_edit_tweet_api_enabled": True,
    "graphql_is_translatable_rweb_tweet_is_translatable_enabled": True,
    "view_counts_everywhere_api_enabled": True,
    "longform_notetweets_consumption_enabled": True,
    "tweet_awards_web_tipping_enabled": False,
    "freedom_of_speech_not_reach_fetch_enabled": True,
    "standardized_nudges_misinfo": True,
    "longform_notetweets_rich_text_read_enabled": True,
    "responsive_web_enhance_cards_enabled": False,
}


@dataclass(frozen=True)
class SessionCookies:
    """Cookies of a logged-in session.

    Attributes:
        cookies: All cookies as (name, value) pairs.
        csrf_token: Value of the ct0 cookie.
        auth_token: Value of the auth_token cookie.
        guest_token: Value of the guest_id cookie without its version prefix.
    """

    cookies: tuple[tuple[str, str], ...]
    csrf_token: str
    auth_token: str
    guest_token: str | None = None

    def header(self) -> str:
        """Render the Cookie header."""
        return "; ".join(f"{name}={value}" for name, value in self.cookies)


def parse_session_cookies(raw: str) -> SessionCookies:
    """Parse exported cookies.

    Accepts a JSON list of {"name", "value"} objects, also when the list
    was JSON-encoded twice.

    Args:
        raw: Cookie export.

    Returns:
        Parsed session cookies.

    Raises:
        ConfigError: If the export is malformed or lacks ct0/auth_token.
    """
    if not raw:
        raise ConfigError("No Twitter cookies provided")
    try:
        data = json.loads(raw)
        if isinstance(data, str):
            data = json.loads(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse cookie data: {e}") from e

    if not isinstance(data, list):
        raise ConfigError("Cookie data is not in the expected format")

    values: dict[str, str] = {}
    pairs: list[tuple[str, str]] = []
    for item in data:
        if not isinstance(item, dict) or "name" not in item or "value" not in item:
            raise ConfigError("Cookie data is not in the expected format")
        pairs.append((str(item["name"]), str(item["value"])))
        values[str(item["name"])] = str(item["value"])

    if "ct0" not in values or "auth_token" not in values:
        raise ConfigError("Missing required cookies: ct0, auth_token")

    guest = values.get("guest_id")
    return SessionCookies(
        cookies=tuple(pairs),
        csrf_token=values["ct0"],
        auth_token=values["auth_token"],
        guest_token=guest.replace("v1%3A", "") if guest else None,
    )


class TwitterBrowserClient:
    """TwitterClient implementation using a browser session."""

    def __init__(
        self,
        config: TwitterConfig,
        *,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Twitter settings (cookie export).
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport (tests).

        Raises:
            ConfigError: If the cookies cannot be parsed.
        """
        self._session = parse_session_cookies(config.cookies)
        self._timeout = timeout
        self._transport = transport
        logger.info("Twitter browser client initialized")

    def _headers(self) -> dict[str, str]:
        headers = {
            "authorization": f"Bearer {WEB_BEARER_TOKEN}",
            "cookie": self._session.header(),
            "content-type": "application/json",
            "x-csrf-token": self._session.csrf_token,
            "x-twitter-auth-type": "OAuth2Session",
            "x-twitter-active-user": "yes",
            "x-twitter-client-language": "en",
            "accept": "*/*",
            "origin": "https://twitter.com",
            "referer": "https://twitter.com/home",
        }
        if self._session.guest_token:
            headers["x-guest-token"] = self._session.guest_token
        return headers

    async def post_tweet(self, text: str) -> dict[str, Any]:
        """Post a tweet.

        Args:
            text: Tweet content.

        Returns:
            {"success": True, "result": <GraphQL response>}.

        Raises:
            AdapterError: If the request fails or the response reports errors.
        """
        body = {
            "variables": {
                "tweet_text": text,
                "dark_request": False,
                "media": {"media_entities": [], "possibly_sensitive": False},
                "semantic_annotation_ids": [],
            },
            "features": CREATE_TWEET_FEATURES,
            "fieldToggles": {},
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.post(
                    CREATE_TWEET_URL, json=body, headers=self._headers()
                )
        except httpx.RequestError as e:
            logger.error("Error sending tweet: %s", e)
            raise AdapterError(Platform.TWITTER.value, str(e)) from e

        logger.info("Tweet response status: %d", response.status_code)
        if response.is_error:
            raise AdapterError(
                Platform.TWITTER.value,
                f"Tweet failed: {response.text}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise AdapterError(
                Platform.TWITTER.value,
                f"Failed to parse response: {response.text}",
                status_code=response.status_code,
            ) from e

        if result.get("errors"):
            raise AdapterError(
                Platform.TWITTER.value,
                f"Tweet failed: {result['errors']}",
                status_code=response.status_code,
            )

        return {"success": True, "result": result}
