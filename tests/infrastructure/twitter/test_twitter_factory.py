"""Tests for Twitter client selection."""

import json

import pytest

from crossrelay.config import ConfigError, TwitterConfig
from crossrelay.infrastructure.twitter import (
    TwitterApiClient,
    TwitterBrowserClient,
    create_twitter_client,
    is_twitter_enabled,
)

COOKIES = json.dumps(
    [{"name": "ct0", "value": "c"}, {"name": "auth_token", "value": "a"}]
)


class TestCreateTwitterClient:
    """create_twitter_client tests."""

    def test_api_client(self) -> None:
        """Test that the API client is used when enabled."""
        client = create_twitter_client(TwitterConfig(enabled=True, api_key="k"))

        assert isinstance(client, TwitterApiClient)

    def test_browser_client_takes_precedence(self) -> None:
        """Test that the browser client wins when both are enabled."""
        config = TwitterConfig(enabled=True, use_browser=True, cookies=COOKIES)

        assert isinstance(create_twitter_client(config), TwitterBrowserClient)

    def test_none_enabled(self) -> None:
        """Test that a disabled configuration is rejected."""
        with pytest.raises(ConfigError, match="No Twitter client enabled"):
            create_twitter_client(TwitterConfig())


class TestIsTwitterEnabled:
    """is_twitter_enabled tests."""

    @pytest.mark.parametrize(
        ("config", "expected"),
        [
            (TwitterConfig(), False),
            (TwitterConfig(enabled=True), True),
            (TwitterConfig(use_browser=True), True),
        ],
    )
    def test_enabled(self, config: TwitterConfig, expected: bool) -> None:
        """Test detection of a configured client."""
        assert is_twitter_enabled(config) is expected
