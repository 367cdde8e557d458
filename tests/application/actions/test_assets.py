"""Tests for asset detection and number formatting."""

import pytest

from crossrelay.application.actions.assets import extract_assets
from crossrelay.application.actions.formatting import (
    format_compact_usd,
    format_flow,
    format_percent,
    format_usd,
)


class TestExtractAssets:
    """extract_assets tests."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("What's BTC doing?", ["bitcoin"]),
            ("price of $eth", ["ethereum"]),
            ("bitcoin vs Ethereum vs sol", ["bitcoin", "ethereum", "solana"]),
            ("btc and bitcoin", ["bitcoin"]),
            ("hello there", []),
            ("solid gains", []),
        ],
    )
    def test_extract(self, text: str, expected: list[str]) -> None:
        """Test asset extraction in mention order without duplicates."""
        assert extract_assets(text) == expected


class TestFormatting:
    """Number formatting tests."""

    def test_format_usd(self) -> None:
        """Test price formatting."""
        assert format_usd(67123.456) == "$67,123.46"
        assert format_usd(0.08123) == "$0.0812"

    def test_format_compact_usd(self) -> None:
        """Test large amount formatting."""
        assert format_compact_usd(1.32e12) == "$1.32T"
        assert format_compact_usd(35.2e9) == "$35.20B"
        assert format_compact_usd(4.5e6) == "$4.50M"
        assert format_compact_usd(None) == "n/a"

    def test_format_percent(self) -> None:
        """Test signed percentage formatting."""
        assert format_percent(2.314) == "+2.31%"
        assert format_percent(-1.5) == "-1.50%"
        assert format_percent(None) == "n/a"

    def test_format_flow(self) -> None:
        """Test signed flow formatting."""
        assert format_flow(111.7) == "+$111.7M"
        assert format_flow(-43.21) == "-$43.2M"
        assert format_flow(0) == "+$0.0M"
