"""CoinGecko-compatible market data client."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from crossrelay.domain.exceptions import ActionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketSnapshot:
    """Market data of one asset.

    Attributes:
        coin_id: Data source asset ID (e.g. "bitcoin").
        symbol: Ticker symbol, upper case.
        name: Asset name.
        price: Current price in USD.
        change_24h: 24h price change in percent.
        change_7d: 7d price change in percent.
        high_24h: 24h high in USD.
        low_24h: 24h low in USD.
        volume: 24h trading volume in USD.
        market_cap: Market capitalization in USD.
    """

    coin_id: str
    symbol: str
    name: str
    price: float
    change_24h: float | None = None
    change_7d: float | None = None
    high_24h: float | None = None
    low_24h: float | None = None
    volume: float | None = None
    market_cap: float | None = None


class CoinGeckoClient:
    """Client for the /coins/markets endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL.
            api_key: Optional demo/pro API key.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport (tests).
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def get_markets(self, coin_ids: Sequence[str]) -> list[MarketSnapshot]:
        """Fetch market snapshots.

        Args:
            coin_ids: Asset IDs to fetch.

        Returns:
            Snapshots in the order of ``coin_ids`` (unknown IDs skipped).

        Raises:
            ActionError: If the API fails.
        """
        params = {
            "vs_currency": "usd",
            "ids": ",".join(coin_ids),
            "price_change_percentage": "24h,7d",
        }
        headers = {"accept": "application/json"}
        if self._api_key:
            headers["x-cg-demo-api-key"] = self._api_key

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.get(
                    f"{self._base_url}/coins/markets", params=params, headers=headers
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Market data request failed: %s", e)
            raise ActionError("market_data", f"Market data request failed: {e}") from e

        by_id = {item["id"]: _to_snapshot(item) for item in response.json()}
        return [by_id[coin_id] for coin_id in coin_ids if coin_id in by_id]


def _to_snapshot(item: dict[str, Any]) -> MarketSnapshot:
    return MarketSnapshot(
        coin_id=item["id"],
        symbol=str(item.get("symbol", "")).upper(),
        name=item.get("name", item["id"]),
        price=float(item.get("current_price") or 0.0),
        change_24h=item.get("price_change_percentage_24h"),
        change_7d=item.get("price_change_percentage_7d_in_currency"),
        high_24h=item.get("high_24h"),
        low_24h=item.get("low_24h"),
        volume=item.get("total_volume"),
        market_cap=item.get("market_cap"),
    )
