"""Runtime state: configuration snapshot and the collaborators built from it."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from crossrelay.application.actions import (
    ActionRegistry,
    EtfFlowsAction,
    FinancialAnalysisAction,
    PriceLookupAction,
)
from crossrelay.application.services import (
    Orchestrator,
    PlatformReplyDispatcher,
    ScheduledJobs,
)
from crossrelay.config import ActionsConfig, Config
from crossrelay.domain.repositories import MemoryStore
from crossrelay.domain.services import TwitterClient
from crossrelay.infrastructure.farcaster import FarcasterClient
from crossrelay.infrastructure.llm import LiteLLMGateway, LLMClient
from crossrelay.infrastructure.market import CoinGeckoClient, EtfFlowsClient
from crossrelay.infrastructure.telegram import TelegramClient
from crossrelay.infrastructure.twitter import create_twitter_client, is_twitter_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeState:
    """Everything built from one configuration snapshot.

    Attributes:
        config: The configuration snapshot.
        orchestrator: Message pipeline.
        jobs: Scheduled jobs.
        telegram: Telegram client, None if disabled.
        farcaster: Farcaster client, None if disabled.
        twitter: Twitter client, None if disabled.
    """

    config: Config
    orchestrator: Orchestrator
    jobs: ScheduledJobs
    telegram: TelegramClient | None = None
    farcaster: FarcasterClient | None = None
    twitter: TwitterClient | None = None


def build_actions(config: ActionsConfig) -> ActionRegistry:
    """Build the action registry in matching order.

    Args:
        config: Action settings.

    Returns:
        Registry of financial_analysis, etf_flows (when an endpoint is
        configured) and price_lookup.
    """
    market = CoinGeckoClient(
        config.market_api_url,
        config.market_api_key,
        timeout=config.timeout_seconds,
    )
    registry = ActionRegistry()
    registry.register(FinancialAnalysisAction(market))
    if config.etf_flows_url:
        registry.register(
            EtfFlowsAction(
                EtfFlowsClient(config.etf_flows_url, timeout=config.timeout_seconds)
            )
        )
    registry.register(PriceLookupAction(market))
    return registry


def build_runtime_state(config: Config, memory_store: MemoryStore) -> RuntimeState:
    """Build all collaborators for a configuration snapshot.

    Args:
        config: Configuration snapshot.
        memory_store: Shared memory store.

    Returns:
        New runtime state.

    Raises:
        ConfigError: If an enabled client cannot be configured.
    """
    telegram = TelegramClient(config.telegram) if config.telegram.enabled else None

    farcaster: FarcasterClient | None = None
    if config.farcaster.enabled:
        logger.info(
            "Initializing Farcaster client: has_api_key=%s, has_signer=%s, fid=%s",
            bool(config.farcaster.neynar_api_key),
            bool(config.farcaster.signer_uuid),
            config.farcaster.fid,
        )
        farcaster = FarcasterClient(config.farcaster)

    twitter = (
        create_twitter_client(config.twitter)
        if is_twitter_enabled(config.twitter)
        else None
    )

    debug_llm_messages = bool(config.logging and config.logging.debug_llm_messages)
    gateway = LiteLLMGateway(
        LLMClient(config.llm), debug_llm_messages=debug_llm_messages
    )

    orchestrator = Orchestrator(
        actions=build_actions(config.actions),
        memory_store=memory_store,
        gateway=gateway,
        dispatcher=PlatformReplyDispatcher(
            telegram=telegram, farcaster=farcaster, twitter=twitter
        ),
        persona=config.persona,
        history_limit=config.memory.history_limit,
    )
    jobs = ScheduledJobs(
        orchestrator=orchestrator,
        persona=config.persona,
        farcaster=farcaster,
        twitter=twitter,
    )
    return RuntimeState(
        config=config,
        orchestrator=orchestrator,
        jobs=jobs,
        telegram=telegram,
        farcaster=farcaster,
        twitter=twitter,
    )


class RelayRuntime:
    """Holds the current runtime state.

    Reconfiguration builds a complete new state before swapping the single
    reference, so a request that captured ``current`` keeps a consistent set
    of collaborators until it finishes.
    """

    def __init__(
        self,
        config: Config,
        memory_store: MemoryStore,
        builder: Callable[[Config, MemoryStore], RuntimeState] = build_runtime_state,
    ) -> None:
        """Initialize the runtime.

        Args:
            config: Initial configuration.
            memory_store: Memory store shared by all states.
            builder: Builds a state from a configuration.
        """
        self._memory_store = memory_store
        self._builder = builder
        self._state = builder(config, memory_store)

    @property
    def current(self) -> RuntimeState:
        """The current state snapshot."""
        return self._state

    @property
    def config(self) -> Config:
        """The current configuration."""
        return self._state.config

    def update_config(self, config: Config) -> None:
        """Replace the configuration and everything built from it.

        If building the new state fails, the current state stays in place.

        Args:
            config: New configuration.

        Raises:
            ConfigError: If the new configuration cannot be applied.
        """
        new_state = self._builder(config, self._memory_store)
        self._state = new_state
        logger.info("Runtime reconfigured")
