"""Tests for memory formatting."""

from crossrelay.domain.entities import ConversationTurn, Role
from crossrelay.domain.services import combine_context, format_history


class TestFormatHistory:
    """format_history tests."""

    def test_empty(self) -> None:
        """Test that no turns give an empty string."""
        assert format_history([]) == ""

    def test_joins_in_order(self) -> None:
        """Test that turns are joined oldest first."""
        turns = [
            ConversationTurn(role=Role.USER, content="gm"),
            ConversationTurn(role=Role.ASSISTANT, content="gm! how are you?"),
        ]

        assert format_history(turns) == "gm\ngm! how are you?"


class TestCombineContext:
    """combine_context tests."""

    def test_both_empty(self) -> None:
        """Test that empty memory and history give an empty context."""
        assert combine_context("", []) == ""

    def test_long_term_before_history(self) -> None:
        """Test that long-term memory precedes the history."""
        turns = [ConversationTurn(role=Role.USER, content="gm")]

        assert combine_context("likes ETH", turns) == "likes ETH\ngm"

    def test_history_only(self) -> None:
        """Test that an empty long-term block is omitted."""
        turns = [ConversationTurn(role=Role.USER, content="gm")]

        assert combine_context("", turns) == "gm"
