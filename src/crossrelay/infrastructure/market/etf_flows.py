"""ETF flows data client.

Reads a JSON document of the form::

    {"date": "2024-01-11",
     "flows": [{"ticker": "IBIT", "flow_usd_millions": 111.7}, ...]}
"""

import logging
from dataclasses import dataclass

import httpx

from crossrelay.domain.exceptions import ActionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EtfFlow:
    """Net flow of one fund."""

    ticker: str
    flow_usd_millions: float


@dataclass(frozen=True)
class EtfFlowReport:
    """Daily flows of all tracked funds."""

    date: str
    flows: tuple[EtfFlow, ...]

    @property
    def total_usd_millions(self) -> float:
        """Net flow across all funds."""
        return sum(flow.flow_usd_millions for flow in self.flows)


class EtfFlowsClient:
    """Client for a configured ETF flows endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def get_latest(self) -> EtfFlowReport:
        """Fetch the latest flow report.

        Raises:
            ActionError: If the endpoint fails or returns an unexpected shape.
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
            data = response.json()
            return EtfFlowReport(
                date=str(data["date"]),
                flows=tuple(
                    EtfFlow(
                        ticker=str(item["ticker"]),
                        flow_usd_millions=float(item["flow_usd_millions"]),
                    )
                    for item in data["flows"]
                ),
            )
        except httpx.HTTPError as e:
            logger.warning("ETF flows request failed: %s", e)
            raise ActionError("etf_flows", f"ETF flows request failed: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise ActionError("etf_flows", f"Unexpected ETF flows payload: {e}") from e
