"""Tests for EtfFlowsClient."""

import httpx
import pytest

from crossrelay.domain.exceptions import ActionError
from crossrelay.infrastructure.market import EtfFlow, EtfFlowsClient


def make_client(response: httpx.Response) -> EtfFlowsClient:
    """Create a client answering every request with ``response``."""
    return EtfFlowsClient(
        "https://flows.test/latest",
        transport=httpx.MockTransport(lambda request: response),
    )


class TestEtfFlowsClient:
    """EtfFlowsClient tests."""

    async def test_get_latest(self) -> None:
        """Test parsing a flow report."""
        client = make_client(
            httpx.Response(
                200,
                json={
                    "date": "2024-01-11",
                    "flows": [
                        {"ticker": "IBIT", "flow_usd_millions": 111.7},
                        {"ticker": "GBTC", "flow_usd_millions": -95.1},
                    ],
                },
            )
        )

        report = await client.get_latest()

        assert report.date == "2024-01-11"
        assert report.flows == (
            EtfFlow("IBIT", 111.7),
            EtfFlow("GBTC", -95.1),
        )
        assert report.total_usd_millions == pytest.approx(16.6)

    async def test_http_error(self) -> None:
        """Test that a failed request raises ActionError."""
        client = make_client(httpx.Response(503))

        with pytest.raises(ActionError, match="ETF flows request failed"):
            await client.get_latest()

    @pytest.mark.parametrize(
        "payload",
        [
            {"flows": []},
            {"date": "2024-01-11", "flows": [{"ticker": "IBIT"}]},
            {
                "date": "2024-01-11",
                "flows": [{"ticker": "IBIT", "flow_usd_millions": "n/a"}],
            },
        ],
    )
    async def test_unexpected_payload(self, payload: dict) -> None:
        """Test that an unexpected shape raises ActionError."""
        client = make_client(httpx.Response(200, json=payload))

        with pytest.raises(ActionError, match="Unexpected ETF flows payload"):
            await client.get_latest()
