"""Actions: deterministic handlers checked before model generation."""

from crossrelay.application.actions.etf_flows import EtfFlowsAction
from crossrelay.application.actions.financial_analysis import FinancialAnalysisAction
from crossrelay.application.actions.price_lookup import PriceLookupAction
from crossrelay.application.actions.registry import ActionRegistry

__all__ = [
    "ActionRegistry",
    "EtfFlowsAction",
    "FinancialAnalysisAction",
    "PriceLookupAction",
]
