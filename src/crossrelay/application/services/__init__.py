"""Application services."""

from crossrelay.application.services.orchestrator import (
    ANALYSIS_SEPARATOR,
    Orchestrator,
    join_elaboration,
)
from crossrelay.application.services.reply_dispatcher import PlatformReplyDispatcher
from crossrelay.application.services.scheduler import (
    ETF_FLOWS_CRON,
    FINANCIAL_ANALYSIS_CRON,
    ScheduledJobs,
    Scheduler,
)

__all__ = [
    "ANALYSIS_SEPARATOR",
    "ETF_FLOWS_CRON",
    "FINANCIAL_ANALYSIS_CRON",
    "Orchestrator",
    "PlatformReplyDispatcher",
    "ScheduledJobs",
    "Scheduler",
    "join_elaboration",
]
