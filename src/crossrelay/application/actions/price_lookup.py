"""Price lookup action."""

import re

from crossrelay.application.actions.assets import extract_assets
from crossrelay.application.actions.formatting import format_percent, format_usd
from crossrelay.domain.entities import ActionResult, Message
from crossrelay.infrastructure.market import CoinGeckoClient

PRICE_PATTERN = re.compile(r"\b(price|prices|worth|cost|trading at)\b", re.IGNORECASE)


class PriceLookupAction:
    """Answers price questions with the current price, verbatim."""

    name = "price_lookup"

    def __init__(self, market: CoinGeckoClient) -> None:
        self._market = market

    def should_execute(self, message: Message) -> bool:
        return bool(PRICE_PATTERN.search(message.text)) and bool(
            extract_assets(message.text)
        )

    async def execute(self, message: Message) -> ActionResult:
        snapshots = await self._market.get_markets(extract_assets(message.text))
        if not snapshots:
            return ActionResult(text="No price data available right now.")

        lines = [
            f"{s.symbol}: {format_usd(s.price)} (24h {format_percent(s.change_24h)})"
            for s in snapshots
        ]
        return ActionResult(text="\n".join(lines))
