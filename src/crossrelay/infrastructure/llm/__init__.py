"""LLM integration."""

from crossrelay.infrastructure.llm.client import LLMClient
from crossrelay.infrastructure.llm.exceptions import (
    GatewayAuthError,
    GatewayError,
    GatewayRateLimitError,
    GatewayUpstreamError,
)
from crossrelay.infrastructure.llm.gateway import LiteLLMGateway

__all__ = [
    "GatewayAuthError",
    "GatewayError",
    "GatewayRateLimitError",
    "GatewayUpstreamError",
    "LLMClient",
    "LiteLLMGateway",
]
