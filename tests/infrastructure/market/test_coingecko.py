"""Tests for CoinGeckoClient."""

import httpx
import pytest

from crossrelay.domain.exceptions import ActionError
from crossrelay.infrastructure.market import CoinGeckoClient, MarketSnapshot

MARKETS = [
    {
        "id": "ethereum",
        "symbol": "eth",
        "name": "Ethereum",
        "current_price": 2250.5,
        "price_change_percentage_24h": -1.2,
        "price_change_percentage_7d_in_currency": 4.8,
        "high_24h": 2300.0,
        "low_24h": 2200.0,
        "total_volume": 9_000_000_000,
        "market_cap": 270_000_000_000,
    },
    {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "current_price": 43000,
    },
]


class TestCoinGeckoClient:
    """CoinGeckoClient tests."""

    async def test_get_markets(self) -> None:
        """Test fetching snapshots in request order."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=MARKETS)

        client = CoinGeckoClient(
            "https://cg.test/api/v3/", transport=httpx.MockTransport(handler)
        )

        snapshots = await client.get_markets(["bitcoin", "ethereum", "dogecoin"])

        assert [s.coin_id for s in snapshots] == ["bitcoin", "ethereum"]
        assert snapshots[1] == MarketSnapshot(
            coin_id="ethereum",
            symbol="ETH",
            name="Ethereum",
            price=2250.5,
            change_24h=-1.2,
            change_7d=4.8,
            high_24h=2300.0,
            low_24h=2200.0,
            volume=9_000_000_000,
            market_cap=270_000_000_000,
        )
        assert snapshots[0].change_24h is None

        url = requests[0].url
        assert url.path == "/api/v3/coins/markets"
        assert url.params["vs_currency"] == "usd"
        assert url.params["ids"] == "bitcoin,ethereum,dogecoin"
        assert url.params["price_change_percentage"] == "24h,7d"
        assert "x-cg-demo-api-key" not in requests[0].headers

    async def test_api_key_header(self) -> None:
        """Test that the API key is sent when configured."""
        headers: list[httpx.Headers] = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers)
            return httpx.Response(200, json=[])

        client = CoinGeckoClient(
            "https://cg.test", "demo-key", transport=httpx.MockTransport(handler)
        )

        await client.get_markets(["bitcoin"])

        assert headers[0]["x-cg-demo-api-key"] == "demo-key"

    async def test_http_error(self) -> None:
        """Test that a failed request raises ActionError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"error": "rate limited"})

        client = CoinGeckoClient(
            "https://cg.test", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(ActionError, match="Market data request failed"):
            await client.get_markets(["bitcoin"])
