"""Message entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Platform(str, Enum):
    """Messaging surfaces the relay talks to."""

    TELEGRAM = "telegram"
    FARCASTER = "farcaster"
    TWITTER = "twitter"


@dataclass(frozen=True)
class Author:
    """Message author.

    Attributes:
        username: Platform username. Used as the conversation and memory
            partition key.
        display_name: Human-readable name.
        fid: Farcaster ID.
        custody_address: Farcaster custody address.
        chat_id: Telegram chat ID, required to reply on Telegram.
        verifications: Farcaster verified addresses.
    """

    username: str
    display_name: str = ""
    fid: str | None = None
    custody_address: str | None = None
    chat_id: int | None = None
    verifications: tuple[str, ...] = ()


@dataclass(frozen=True)
class Message:
    """Canonical inbound message (platform-independent).

    Attributes:
        id: Platform-specific message ID.
        text: Message content.
        author: Who sent the message.
        timestamp: Event time in milliseconds since epoch.
        platform: Surface the message arrived on.
        reply_to: ID of the message this one replies to (Telegram).
        hash: Cast hash (Farcaster).
        thread_hash: Root cast hash of the thread (Farcaster).
        parent_hash: Parent cast hash (Farcaster).
        parent_url: Parent channel URL (Farcaster).
        embeds: Attachments carried by the inbound message.
        raw: Untouched platform payload.
    """

    id: str
    text: str
    author: Author
    timestamp: int
    platform: Platform
    reply_to: str | None = None
    hash: str | None = None
    thread_hash: str | None = None
    parent_hash: str | None = None
    parent_url: str | None = None
    embeds: tuple[Any, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def conversation_id(self) -> str:
        """Conversation partition key (the author's username)."""
        return self.author.username
