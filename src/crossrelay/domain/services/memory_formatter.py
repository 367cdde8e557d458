"""Formatting of memory and history for the model context."""

from collections.abc import Sequence

from crossrelay.domain.entities import ConversationTurn


def format_history(turns: Sequence[ConversationTurn]) -> str:
    """Join conversation turns into one block, oldest first."""
    return "\n".join(turn.content for turn in turns)


def combine_context(long_term_context: str, turns: Sequence[ConversationTurn]) -> str:
    """Combine long-term memory and short-term history.

    Args:
        long_term_context: Formatted long-term memory block.
        turns: Conversation turns in chronological order.

    Returns:
        Long-term block followed by the history, empty parts omitted.
    """
    parts = [long_term_context, format_history(turns)]
    return "\n".join(part for part in parts if part)
