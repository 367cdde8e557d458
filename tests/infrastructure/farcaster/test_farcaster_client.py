"""Tests for FarcasterClient."""

import json
from typing import Any

import httpx
import pytest

from crossrelay.config import ConfigError, FarcasterConfig
from crossrelay.domain.entities import Platform
from crossrelay.domain.exceptions import AdapterError, MessageValidationError
from crossrelay.infrastructure.farcaster import FarcasterClient


@pytest.fixture
def config() -> FarcasterConfig:
    """Create Farcaster config."""
    return FarcasterConfig(
        enabled=True,
        fid="999",
        neynar_api_key="neynar-key",
        signer_uuid="signer-1",
        api_base_url="https://neynar.test",
    )


def make_webhook(**cast_fields: Any) -> dict[str, Any]:
    """Create a Neynar cast.created webhook payload."""
    cast = {
        "hash": "0xabc",
        "text": "gm, how are you?",
        "timestamp": "2024-01-01T12:00:00.000Z",
        "thread_hash": "0xabc",
        "parent_hash": None,
        "parent_url": None,
        "embeds": [],
        "author": {
            "fid": 3,
            "username": "alice",
            "display_name": "Alice",
            "custody_address": "0x123",
            "verifications": ["0x456"],
        },
    }
    cast.update(cast_fields)
    return {"type": "cast.created", "data": cast}


class TestPublishCast:
    """publish_cast tests."""

    async def test_reply_cast(self, config: FarcasterConfig) -> None:
        """Test the cast request for a threaded reply."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True, "cast": {"hash": "0x1"}})

        client = FarcasterClient(config, transport=httpx.MockTransport(handler))

        result = await client.publish_cast("gm!", parent_hash="0xabc")

        assert result == {"success": True, "cast": {"hash": "0x1"}}
        request = requests[0]
        assert str(request.url) == "https://neynar.test/v2/farcaster/cast"
        assert request.headers["x-api-key"] == "neynar-key"
        body = json.loads(request.content)
        assert body["signer_uuid"] == "signer-1"
        assert body["text"] == "gm!"
        assert body["parent"] == "0xabc"
        assert len(body["idem"]) == 16
        assert "embeds" not in body

    async def test_top_level_cast_with_embeds(self, config: FarcasterConfig) -> None:
        """Test a top-level cast carrying embeds."""
        bodies: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True})

        client = FarcasterClient(config, transport=httpx.MockTransport(handler))
        embeds = [{"url": "https://example.com/chart.png"}]

        await client.publish_cast("chart", embeds=embeds)

        assert "parent" not in bodies[0]
        assert bodies[0]["embeds"] == embeds

    async def test_idempotency_token_unique(self, config: FarcasterConfig) -> None:
        """Test that each cast gets its own idempotency token."""
        tokens: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            tokens.append(json.loads(request.content)["idem"])
            return httpx.Response(200, json={})

        client = FarcasterClient(config, transport=httpx.MockTransport(handler))

        await client.publish_cast("a")
        await client.publish_cast("b")

        assert tokens[0] != tokens[1]

    async def test_api_error(self, config: FarcasterConfig) -> None:
        """Test that a rejected cast raises AdapterError with the status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"message": "signer not approved"})

        client = FarcasterClient(config, transport=httpx.MockTransport(handler))

        with pytest.raises(AdapterError) as exc_info:
            await client.publish_cast("gm")

        assert exc_info.value.status_code == 403
        assert exc_info.value.platform == Platform.FARCASTER.value

    async def test_missing_api_key(self) -> None:
        """Test that publishing without an API key is a configuration error."""
        client = FarcasterClient(FarcasterConfig(enabled=True, fid="1"))

        with pytest.raises(ConfigError):
            await client.publish_cast("gm")


class TestConvertWebhook:
    """convert_webhook tests."""

    def test_cast_created(self, config: FarcasterConfig) -> None:
        """Test conversion of a new cast."""
        payload = make_webhook()

        message = FarcasterClient(config).convert_webhook(payload)

        assert message is not None
        assert message.id == "0xabc"
        assert message.hash == "0xabc"
        assert message.thread_hash == "0xabc"
        assert message.platform == Platform.FARCASTER
        assert message.author.username == "alice"
        assert message.author.fid == "3"
        assert message.author.custody_address == "0x123"
        assert message.author.verifications == ("0x456",)
        assert message.timestamp == 1704110400000
        assert message.raw == payload

    def test_reply_fields(self, config: FarcasterConfig) -> None:
        """Test that parent references are kept."""
        payload = make_webhook(
            parent_hash="0xparent", parent_url="https://warpcast.com/~/channel/crypto"
        )

        message = FarcasterClient(config).convert_webhook(payload)

        assert message is not None
        assert message.parent_hash == "0xparent"
        assert message.parent_url == "https://warpcast.com/~/channel/crypto"

    def test_other_event_ignored(self, config: FarcasterConfig) -> None:
        """Test that events other than cast.created produce no message."""
        payload = make_webhook()
        payload["type"] = "follow.created"

        assert FarcasterClient(config).convert_webhook(payload) is None

    def test_empty_cast_ignored(self, config: FarcasterConfig) -> None:
        """Test that casts without text produce no message."""
        assert FarcasterClient(config).convert_webhook(make_webhook(text="")) is None

    def test_malformed_payload(self, config: FarcasterConfig) -> None:
        """Test that a malformed payload raises MessageValidationError."""
        with pytest.raises(MessageValidationError):
            FarcasterClient(config).convert_webhook(
                {"type": "cast.created", "data": {"text": "gm"}}
            )


class TestIsOwnMessage:
    """is_own_message tests."""

    def test_own_cast(self, config: FarcasterConfig) -> None:
        """Test that casts by the agent's fid are recognized."""
        client = FarcasterClient(config)
        message = client.convert_webhook(
            make_webhook(author={"fid": 999, "username": "relay"})
        )

        assert message is not None
        assert client.is_own_message(message)

    def test_other_author(self, config: FarcasterConfig) -> None:
        """Test that casts by others are not the agent's."""
        client = FarcasterClient(config)
        message = client.convert_webhook(make_webhook())

        assert message is not None
        assert not client.is_own_message(message)
        assert client.fid == "999"
