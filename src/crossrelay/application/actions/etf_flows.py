"""ETF flows action."""

import re

from crossrelay.application.actions.formatting import format_flow
from crossrelay.domain.entities import ActionResult, Message
from crossrelay.infrastructure.market import EtfFlowsClient

ETF_PATTERN = re.compile(r"\betfs?\b", re.IGNORECASE)
FLOW_PATTERN = re.compile(r"\b(flows?|inflows?|outflows?)\b", re.IGNORECASE)

ETF_ANALYST_CONTEXT = (
    "You are a concise market analyst covering spot Bitcoin ETFs. The user "
    "message contains the latest daily net flows per fund in USD millions. "
    "Explain what the flows suggest about demand and which funds lead. Only "
    "use the numbers given; never invent figures."
)


class EtfFlowsAction:
    """Reports the latest ETF net flows and asks the model to interpret them."""

    name = "etf_flows"

    def __init__(self, source: EtfFlowsClient) -> None:
        self._source = source

    def should_execute(self, message: Message) -> bool:
        return bool(ETF_PATTERN.search(message.text)) and bool(
            FLOW_PATTERN.search(message.text)
        )

    async def execute(self, message: Message) -> ActionResult:
        report = await self._source.get_latest()
        if not report.flows:
            return ActionResult(text=f"No ETF flow data for {report.date}.")

        lines = [f"💰 ETF Flows ({report.date}):"]
        lines.extend(
            f"{flow.ticker}: {format_flow(flow.flow_usd_millions)}"
            for flow in report.flows
        )
        lines.append(f"Total: {format_flow(report.total_usd_millions)}")
        return ActionResult(text="\n".join(lines), context=ETF_ANALYST_CONTEXT)
