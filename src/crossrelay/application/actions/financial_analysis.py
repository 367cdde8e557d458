"""Financial analysis action."""

import re

from crossrelay.application.actions.assets import DEFAULT_ASSETS, extract_assets
from crossrelay.application.actions.formatting import (
    format_compact_usd,
    format_percent,
    format_usd,
)
from crossrelay.domain.entities import ActionResult, Message
from crossrelay.infrastructure.market import CoinGeckoClient, MarketSnapshot

ANALYSIS_PATTERN = re.compile(
    r"\b(doing|analy[sz]e|analysis|outlook|trend|trending|moving|market)\b",
    re.IGNORECASE,
)
MARKET_REPORT_PATTERN = re.compile(
    r"\bmarket (analysis|update|report)\b", re.IGNORECASE
)

ANALYST_CONTEXT = (
    "You are a concise crypto market analyst. The user message contains live "
    "market data. Interpret it: summarize momentum, notable moves and what to "
    "watch next. Only use the numbers given; never invent prices or figures. "
    "Keep it short and do not give financial advice."
)


class FinancialAnalysisAction:
    """Fetches market data and asks the model to interpret it.

    Matches questions about what an asset is doing ("What's BTC doing?") and
    generic market report requests, which cover the default assets.
    """

    name = "financial_analysis"

    def __init__(self, market: CoinGeckoClient) -> None:
        self._market = market

    def should_execute(self, message: Message) -> bool:
        if MARKET_REPORT_PATTERN.search(message.text):
            return True
        return bool(ANALYSIS_PATTERN.search(message.text)) and bool(
            extract_assets(message.text)
        )

    async def execute(self, message: Message) -> ActionResult:
        coin_ids = extract_assets(message.text) or list(DEFAULT_ASSETS)
        snapshots = await self._market.get_markets(coin_ids)
        if not snapshots:
            return ActionResult(text="No market data available right now.")

        lines = ["📊 Market Data:"]
        lines.extend(_format_snapshot(s) for s in snapshots)
        return ActionResult(text="\n".join(lines), context=ANALYST_CONTEXT)


def _format_snapshot(snapshot: MarketSnapshot) -> str:
    return (
        f"{snapshot.symbol}: {format_usd(snapshot.price)}"
        f" | 24h: {format_percent(snapshot.change_24h)}"
        f" | 7d: {format_percent(snapshot.change_7d)}"
        f" | Vol: {format_compact_usd(snapshot.volume)}"
        f" | MCap: {format_compact_usd(snapshot.market_cap)}"
    )
