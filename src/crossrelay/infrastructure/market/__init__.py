"""Market data sources."""

from crossrelay.infrastructure.market.coingecko import CoinGeckoClient, MarketSnapshot
from crossrelay.infrastructure.market.etf_flows import (
    EtfFlow,
    EtfFlowReport,
    EtfFlowsClient,
)

__all__ = [
    "CoinGeckoClient",
    "EtfFlow",
    "EtfFlowReport",
    "EtfFlowsClient",
    "MarketSnapshot",
]
