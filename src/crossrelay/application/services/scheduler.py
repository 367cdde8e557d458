"""Scheduled jobs and schedule dispatch."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from crossrelay.application.services.orchestrator import Orchestrator
from crossrelay.config import PersonaConfig
from crossrelay.domain.entities import (
    ActionResult,
    Author,
    Message,
    Platform,
    ScheduledEvent,
)
from crossrelay.domain.services import CastPublisher, TwitterClient

logger = logging.getLogger(__name__)

# 00:00, 06:00, 12:00, 18:00 UTC
FINANCIAL_ANALYSIS_CRON = "0 */6 * * *"
# 03:00, 09:00, 15:00, 21:00 UTC, three hours after each financial analysis
ETF_FLOWS_CRON = "0 3/6 * * *"

SCHEDULER_USERNAME = "scheduler"

FINANCIAL_ANALYSIS_PROMPT = (
    "Write one short social post analysing the market data in the user "
    "message. Mention the most notable move and the overall tone. Only use "
    "the numbers given. No hashtags, no financial advice."
)
ETF_FLOWS_PROMPT = (
    "Write one short social post about the ETF flow data in the user "
    "message: net direction, leading funds and what it says about demand. "
    "Only use the numbers given. No hashtags, no financial advice."
)


class ScheduledJobs:
    """Periodic jobs that post analyses to the broadcast channels.

    Each job runs a synthesized message through the scheduled variant of the
    orchestrator and publishes the returned text as a top-level Farcaster
    cast and/or tweet.
    """

    def __init__(
        self,
        orchestrator: Orchestrator,
        persona: PersonaConfig,
        farcaster: CastPublisher | None = None,
        twitter: TwitterClient | None = None,
    ) -> None:
        """Initialize the jobs.

        Args:
            orchestrator: Orchestrator used in scheduled mode.
            persona: Persona whose system prompt frames the posts.
            farcaster: Farcaster publisher, None if disabled.
            twitter: Twitter client, None if disabled.
        """
        self._orchestrator = orchestrator
        self._persona = persona
        self._farcaster = farcaster
        self._twitter = twitter

    async def run_financial_analysis(self) -> str | None:
        """Post a market analysis.

        Returns:
            Published text, or None if no action handled the job.
        """
        return await self._run(
            "financial_analysis", "market analysis", FINANCIAL_ANALYSIS_PROMPT
        )

    async def run_etf_flows_analysis(self) -> str | None:
        """Post an ETF flows analysis.

        Returns:
            Published text, or None if no action handled the job.
        """
        return await self._run("etf_flows", "etf flows", ETF_FLOWS_PROMPT)

    async def _run(self, job_name: str, text: str, prompt: str) -> str | None:
        logger.info("Running scheduled job: %s", job_name)
        message = self._pseudo_message(text)
        context = f"{self._persona.system_prompt}\n\n{prompt}"

        result = await self._orchestrator.process_scheduled_message(
            message, context=context
        )
        if result is None:
            logger.warning("No action handled scheduled job: %s", job_name)
            return None

        await self._publish(result)
        logger.info("Scheduled job completed: %s", job_name)
        return result.text

    def _pseudo_message(self, text: str) -> Message:
        # Length policy follows the strictest broadcast channel
        platform = Platform.FARCASTER if self._farcaster else Platform.TWITTER
        return Message(
            id=f"scheduled-{uuid.uuid4()}",
            text=text,
            author=Author(username=SCHEDULER_USERNAME, display_name="Scheduler"),
            timestamp=int(datetime.now(timezone.utc).timestamp() * 1000),
            platform=platform,
        )

    async def _publish(self, result: ActionResult) -> None:
        if self._farcaster is None and self._twitter is None:
            logger.warning("No broadcast channel enabled, scheduled post dropped")
            return
        if self._farcaster is not None:
            await self._farcaster.publish_cast(
                result.text, None, list(result.embeds) if result.embeds else None
            )
        if self._twitter is not None:
            await self._twitter.post_tweet(result.text)


class Scheduler:
    """Dispatches fired schedules to the matching job.

    Jobs are looked up through ``jobs_provider`` at every event so that a
    reconfiguration between two events is picked up.
    """

    # schedule expression -> ScheduledJobs method
    JOBS: dict[str, str] = {
        FINANCIAL_ANALYSIS_CRON: "run_financial_analysis",
        ETF_FLOWS_CRON: "run_etf_flows_analysis",
    }

    def __init__(self, jobs_provider: Callable[[], ScheduledJobs]) -> None:
        """Initialize the scheduler.

        Args:
            jobs_provider: Returns the jobs of the current configuration.
        """
        self._jobs_provider = jobs_provider

    async def handle_scheduled_event(self, event: ScheduledEvent) -> bool:
        """Run the job registered for the event's schedule expression.

        Args:
            event: Fired schedule.

        Returns:
            True if a job ran, False for an unknown expression.

        Raises:
            Exception: Any error raised by the job.
        """
        job_name = self.JOBS.get(event.cron)
        if job_name is None:
            logger.warning("No job for schedule: %s", event.cron)
            return False

        try:
            await getattr(self._jobs_provider(), job_name)()
        except Exception:
            logger.exception("Error handling scheduled event: %s", event.cron)
            raise
        return True
