"""LLM client wrapper."""

import logging
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError

from crossrelay.config import LLMConfig
from crossrelay.infrastructure.llm.exceptions import (
    GatewayAuthError,
    GatewayRateLimitError,
    GatewayUpstreamError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """LiteLLM wrapper client.

    This class provides a simplified interface to LiteLLM,
    applying configuration and handling errors. It never retries.
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the client.

        Args:
            config: LLM configuration (model, credentials, generation params).
        """
        self._config = config

    async def complete(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> str:
        """Execute chat completion.

        Args:
            messages: OpenAI-format message list.
                [{"role": "system", "content": "..."}, ...]
            **kwargs: Additional parameters (override config).

        Returns:
            Generated text of the first choice.

        Raises:
            GatewayAuthError: No API key configured, or the key was rejected.
            GatewayRateLimitError: Rate limit exceeded.
            GatewayUpstreamError: Other API errors.
        """
        if not self._config.api_key:
            raise GatewayAuthError("Missing LLM API key")

        params: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "messages": messages,
            "api_key": self._config.api_key,
            **kwargs,
        }
        if self._config.api_base:
            params.setdefault("api_base", self._config.api_base)

        logger.debug("LLM request: model=%s", params["model"])

        try:
            response = await litellm.acompletion(**params)
        except AuthenticationError as e:
            logger.error("LLM authentication error: %s", e)
            raise GatewayAuthError(str(e)) from e
        except RateLimitError as e:
            logger.warning("LLM rate limit exceeded: %s", e)
            raise GatewayRateLimitError(str(e), status_code=429) from e
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            logger.error("LLM error (status=%s): %s", status_code, e)
            raise GatewayUpstreamError(str(e), status_code=status_code) from e

        content = response.choices[0].message.content
        logger.debug("LLM response received")
        return content or ""
