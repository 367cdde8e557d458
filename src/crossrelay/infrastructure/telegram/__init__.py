"""Telegram integration."""

from crossrelay.infrastructure.telegram.client import (
    SECRET_TOKEN_HEADER,
    TelegramClient,
)

__all__ = ["SECRET_TOKEN_HEADER", "TelegramClient"]
