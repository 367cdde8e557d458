"""Tests for RelayRuntime."""

import json
from unittest.mock import Mock

import pytest

from crossrelay.application.services import Orchestrator, ScheduledJobs
from crossrelay.config import (
    ActionsConfig,
    Config,
    ConfigError,
    FarcasterConfig,
    LLMConfig,
    MemoryConfig,
    PersonaConfig,
    TelegramConfig,
    TwitterConfig,
)
from crossrelay.domain.repositories import MemoryStore
from crossrelay.infrastructure.farcaster import FarcasterClient
from crossrelay.infrastructure.telegram import TelegramClient
from crossrelay.infrastructure.twitter import TwitterBrowserClient
from crossrelay.runtime import RelayRuntime, RuntimeState, build_actions

COOKIES = json.dumps(
    [{"name": "ct0", "value": "c"}, {"name": "auth_token", "value": "a"}]
)


def make_config(**overrides: object) -> Config:
    """Create a configuration snapshot."""
    fields: dict[str, object] = {
        "llm": LLMConfig(api_key="sk-test"),
        "persona": PersonaConfig(name="relay", system_prompt="You are a bot."),
        "memory": MemoryConfig(database_path=":memory:"),
    }
    fields.update(overrides)
    return Config(**fields)  # type: ignore[arg-type]


@pytest.fixture
def memory_store() -> Mock:
    """Create a mock MemoryStore."""
    return Mock(spec=MemoryStore)


class TestBuildActions:
    """build_actions tests."""

    def test_default_order(self) -> None:
        """Test that ETF flows is skipped without an endpoint."""
        registry = build_actions(ActionsConfig())

        assert registry.names == ["financial_analysis", "price_lookup"]

    def test_with_etf_flows(self) -> None:
        """Test that ETF flows sits between analysis and price lookup."""
        registry = build_actions(ActionsConfig(etf_flows_url="https://flows.test"))

        assert registry.names == ["financial_analysis", "etf_flows", "price_lookup"]


class TestRelayRuntime:
    """RelayRuntime tests."""

    def test_builds_enabled_clients_only(self, memory_store: Mock) -> None:
        """Test that disabled platforms have no client."""
        config = make_config(
            telegram=TelegramConfig(enabled=True, bot_token="t"),
        )

        state = RelayRuntime(config, memory_store).current

        assert state.config is config
        assert isinstance(state.orchestrator, Orchestrator)
        assert isinstance(state.jobs, ScheduledJobs)
        assert isinstance(state.telegram, TelegramClient)
        assert state.farcaster is None
        assert state.twitter is None

    def test_builds_all_clients(self, memory_store: Mock) -> None:
        """Test that every enabled platform gets a client."""
        config = make_config(
            telegram=TelegramConfig(enabled=True, bot_token="t"),
            farcaster=FarcasterConfig(enabled=True, fid="1", neynar_api_key="k"),
            twitter=TwitterConfig(use_browser=True, cookies=COOKIES),
        )

        state = RelayRuntime(config, memory_store).current

        assert isinstance(state.farcaster, FarcasterClient)
        assert isinstance(state.twitter, TwitterBrowserClient)

    def test_update_config_swaps_state(self, memory_store: Mock) -> None:
        """Test that reconfiguration replaces the whole state."""
        runtime = RelayRuntime(make_config(), memory_store)
        before = runtime.current
        new_config = make_config(
            farcaster=FarcasterConfig(enabled=True, fid="1", neynar_api_key="k")
        )

        runtime.update_config(new_config)

        assert runtime.current is not before
        assert runtime.config is new_config
        assert runtime.current.farcaster is not None
        assert before.farcaster is None
        assert before.config is not new_config

    def test_update_config_failure_keeps_state(self, memory_store: Mock) -> None:
        """Test that a configuration that cannot be applied changes nothing."""
        runtime = RelayRuntime(make_config(), memory_store)
        before = runtime.current

        with pytest.raises(ConfigError):
            runtime.update_config(
                make_config(twitter=TwitterConfig(use_browser=True, cookies="[]"))
            )

        assert runtime.current is before

    def test_memory_store_shared(self, memory_store: Mock) -> None:
        """Test that each new state is built with the same memory store."""
        builder = Mock(side_effect=lambda config, store: Mock(spec=RuntimeState))
        runtime = RelayRuntime(make_config(), memory_store, builder=builder)

        runtime.update_config(make_config())

        assert builder.call_count == 2
        assert all(call.args[1] is memory_store for call in builder.call_args_list)
