"""Language model gateway."""

import logging
from collections.abc import Mapping

from crossrelay.domain.entities import Platform
from crossrelay.domain.services.output_policy import (
    DEFAULT_CHARACTER_LIMITS,
    apply_length_policy,
)
from crossrelay.infrastructure.llm.client import LLMClient

logger = logging.getLogger(__name__)


class LiteLLMGateway:
    """LiteLLM-based LanguageModelGateway implementation.

    Stateless: every call sends the given messages once and fits the
    answer to the target platform's character limit.
    """

    def __init__(
        self,
        client: LLMClient,
        *,
        limits: Mapping[Platform, int] = DEFAULT_CHARACTER_LIMITS,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the gateway.

        Args:
            client: LLMClient instance.
            limits: Character limit per platform.
            debug_llm_messages: If True, log LLM messages at INFO level.
        """
        self._client = client
        self._limits = limits
        self._debug_llm_messages = debug_llm_messages

    async def generate(
        self,
        messages: list[dict[str, str]],
        platform: Platform | str,
    ) -> str:
        """Generate a completion for a platform.

        Args:
            messages: OpenAI-format role/content messages.
            platform: Platform whose length policy applies.

        Returns:
            Generated text, truncated to the platform limit.

        Raises:
            GatewayError: If the completion fails.
        """
        if self._should_log():
            self._log_messages(messages)

        response = await self._client.complete(messages)

        if self._should_log():
            self._log_response(response)

        return apply_length_policy(response, platform, self._limits)

    def _should_log(self) -> bool:
        """Check if logging should occur."""
        return self._debug_llm_messages or logger.isEnabledFor(logging.DEBUG)

    def _log_messages(self, messages: list[dict[str, str]]) -> None:
        """Log LLM request messages."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Request Messages ===")
        for i, msg in enumerate(messages):
            log_func("[%d] role=%s", i, msg.get("role", "unknown"))
            log_func("    content: %s", msg.get("content", ""))
        log_func("=== End of Messages ===")

    def _log_response(self, response: str) -> None:
        """Log LLM response."""
        log_func = logger.info if self._debug_llm_messages else logger.debug
        log_func("=== LLM Response ===")
        log_func("response: %s", response)
        log_func("=== End of Response ===")
