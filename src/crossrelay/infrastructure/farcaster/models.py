"""Pydantic models for Neynar cast webhooks."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CastAuthor(BaseModel):
    """Author of a cast."""

    fid: int
    username: str
    display_name: str | None = None
    custody_address: str | None = None
    verifications: list[str] = Field(default_factory=list)


class Cast(BaseModel):
    """Cast object (subset)."""

    hash: str
    text: str = ""
    timestamp: datetime
    author: CastAuthor
    thread_hash: str | None = None
    parent_hash: str | None = None
    parent_url: str | None = None
    embeds: list[Any] = Field(default_factory=list)


class CastWebhook(BaseModel):
    """Neynar webhook envelope."""

    type: str
    data: Cast
