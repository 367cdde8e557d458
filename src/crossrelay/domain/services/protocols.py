"""Domain service protocols."""

from typing import Any, Protocol

from crossrelay.domain.entities import ActionResult, Message, Platform


class Action(Protocol):
    """Deterministic message handler.

    An action decides from the message alone whether it handles it, and
    produces the reply material when it does. Actions never see the
    conversation history.
    """

    name: str

    def should_execute(self, message: Message) -> bool:
        """Check whether this action handles the message.

        Args:
            message: Inbound message.

        Returns:
            True if the action should run.
        """
        ...

    async def execute(self, message: Message) -> ActionResult:
        """Run the action.

        Args:
            message: Inbound message.

        Returns:
            Action result.
        """
        ...


class LanguageModelGateway(Protocol):
    """Chat-completion abstraction.

    Implementations apply the per-platform output length policy before
    returning.
    """

    async def generate(
        self,
        messages: list[dict[str, str]],
        platform: Platform | str,
    ) -> str:
        """Generate a completion.

        Args:
            messages: OpenAI-format role/content messages.
            platform: Platform whose length policy applies.

        Returns:
            Generated text.
        """
        ...


class ReplyDispatcher(Protocol):
    """Routes a reply back to the platform a message came from."""

    async def dispatch(
        self,
        text: str,
        message: Message,
        embeds: tuple[Any, ...] = (),
    ) -> None:
        """Send a reply for the message.

        Args:
            text: Reply text.
            message: Message being answered.
            embeds: Attachments passed to the adapter unmodified.
        """
        ...


class TwitterClient(Protocol):
    """Posting to Twitter (API or browser-session implementation)."""

    async def post_tweet(self, text: str) -> dict[str, Any]:
        """Post a tweet.

        Args:
            text: Tweet content.

        Returns:
            Platform response data.
        """
        ...


class TelegramSender(Protocol):
    """Sending to Telegram chats."""

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send a message to a chat.

        Args:
            chat_id: Target chat ID.
            text: Message content (HTML parse mode).
        """
        ...


class CastPublisher(Protocol):
    """Publishing Farcaster casts."""

    async def publish_cast(
        self,
        text: str,
        parent_hash: str | None = None,
        embeds: list[Any] | None = None,
    ) -> dict[str, Any]:
        """Publish a cast.

        Args:
            text: Cast content.
            parent_hash: Hash of the cast to reply to. None posts top-level.
            embeds: Attachments.

        Returns:
            Platform response data.
        """
        ...
