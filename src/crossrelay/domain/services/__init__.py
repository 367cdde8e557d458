"""Domain services."""

from crossrelay.domain.services.memory_formatter import combine_context, format_history
from crossrelay.domain.services.output_policy import (
    DEFAULT_CHARACTER_LIMITS,
    ELLIPSIS,
    apply_length_policy,
    truncate,
)
from crossrelay.domain.services.protocols import (
    Action,
    CastPublisher,
    LanguageModelGateway,
    ReplyDispatcher,
    TelegramSender,
    TwitterClient,
)

__all__ = [
    "DEFAULT_CHARACTER_LIMITS",
    "ELLIPSIS",
    "Action",
    "CastPublisher",
    "LanguageModelGateway",
    "ReplyDispatcher",
    "TelegramSender",
    "TwitterClient",
    "apply_length_policy",
    "combine_context",
    "format_history",
    "truncate",
]
