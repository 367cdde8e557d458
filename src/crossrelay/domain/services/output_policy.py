"""Per-platform output length policy."""

import logging
from collections.abc import Mapping

from crossrelay.domain.entities import Platform

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

# Farcaster: 320 (an earlier variant used 280 with sentence trimming).
DEFAULT_CHARACTER_LIMITS: Mapping[Platform, int] = {
    Platform.TELEGRAM: 4096,
    Platform.FARCASTER: 320,
}


def truncate(text: str, limit: int) -> str:
    """Cut text to a hard limit, marking the cut with an ellipsis.

    Args:
        text: Text to fit.
        limit: Maximum length in characters.

    Returns:
        The text unchanged if it fits, otherwise a string of exactly
        ``limit`` characters ending with the ellipsis marker.
    """
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def apply_length_policy(
    text: str,
    platform: Platform | str,
    limits: Mapping[Platform, int] = DEFAULT_CHARACTER_LIMITS,
) -> str:
    """Apply the platform's character limit.

    Platforms without a declared limit pass through unmodified.

    Args:
        text: Generated text.
        platform: Target platform.
        limits: Character limit per platform.

    Returns:
        Text that fits the platform.
    """
    try:
        key = Platform(platform)
    except ValueError:
        key = None
    limit = limits.get(key) if key is not None else None
    if limit is None:
        logger.warning(
            "No character limit for platform %s, text passed through", platform
        )
        return text
    return truncate(text, limit)
