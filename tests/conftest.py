"""Common test fixtures."""

from datetime import datetime, timezone

import pytest

from crossrelay.config import PersonaConfig
from crossrelay.domain.entities import Author, Message, Platform


@pytest.fixture
def persona_config() -> PersonaConfig:
    """Create test persona config."""
    return PersonaConfig(
        name="relay",
        system_prompt="You are a friendly bot.",
    )


@pytest.fixture
def timestamp_ms() -> int:
    """Create test timestamp in milliseconds."""
    return int(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp() * 1000)


@pytest.fixture
def telegram_message(timestamp_ms: int) -> Message:
    """Create test Telegram message."""
    return Message(
        id="42",
        text="Hello",
        author=Author(username="bob", display_name="Bob", chat_id=1001),
        timestamp=timestamp_ms,
        platform=Platform.TELEGRAM,
    )


@pytest.fixture
def farcaster_message(timestamp_ms: int) -> Message:
    """Create test Farcaster cast."""
    return Message(
        id="0xabc",
        text="gm, how are you?",
        author=Author(username="alice", display_name="Alice", fid="3"),
        timestamp=timestamp_ms,
        platform=Platform.FARCASTER,
        hash="0xabc",
        thread_hash="0xabc",
    )
