"""Pydantic models for Telegram webhook updates."""

from pydantic import BaseModel, ConfigDict, Field


class TelegramUser(BaseModel):
    """Sender of a Telegram message."""

    id: int
    username: str | None = None
    first_name: str = ""
    last_name: str | None = None


class TelegramChat(BaseModel):
    """Chat a Telegram message belongs to."""

    id: int


class TelegramReplyRef(BaseModel):
    """Message being replied to."""

    message_id: int


class TelegramMessage(BaseModel):
    """Telegram message object (subset)."""

    model_config = ConfigDict(populate_by_name=True)

    message_id: int
    from_user: TelegramUser = Field(alias="from")
    chat: TelegramChat
    date: int
    text: str | None = None
    reply_to_message: TelegramReplyRef | None = None


class TelegramUpdate(BaseModel):
    """Telegram webhook update (subset)."""

    update_id: int
    message: TelegramMessage | None = None
