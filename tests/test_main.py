"""Tests for the application entry point."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest

from crossrelay.__main__ import configure_logging, reload_config
from crossrelay.config import ConfigError, LoggingConfig
from crossrelay.runtime import RelayRuntime

VALID_CONFIG = """
llm:
  api_key: sk-test
persona:
  name: relay
  system_prompt: You are a friendly bot.
memory:
  database_path: ":memory:"
logging:
  level: WARNING
"""


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore the root and per-logger levels."""
    root = logging.getLogger()
    root_level = root.level
    litellm_level = logging.getLogger("LiteLLM").level
    yield
    root.setLevel(root_level)
    logging.getLogger("LiteLLM").setLevel(litellm_level)


class TestConfigureLogging:
    """configure_logging tests."""

    def test_none_keeps_defaults(self, restore_logging: None) -> None:
        """Test that None changes nothing."""
        level = logging.getLogger().level

        configure_logging(None)

        assert logging.getLogger().level == level

    def test_sets_levels(self, restore_logging: None) -> None:
        """Test setting root and per-logger levels."""
        configure_logging(
            LoggingConfig(level="debug", loggers={"LiteLLM": "warning"})
        )

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("LiteLLM").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, restore_logging: None) -> None:
        """Test that an unknown level falls back to INFO."""
        configure_logging(LoggingConfig(level="verbose"))

        assert logging.getLogger().level == logging.INFO


class TestReloadConfig:
    """reload_config tests."""

    def test_applies_new_config(
        self, tmp_path: Path, restore_logging: None
    ) -> None:
        """Test that the file is loaded and applied to the runtime."""
        path = tmp_path / "config.yaml"
        path.write_text(VALID_CONFIG, encoding="utf-8")
        runtime = Mock(spec=RelayRuntime)

        assert reload_config(runtime, path)

        runtime.update_config.assert_called_once()
        config = runtime.update_config.call_args.args[0]
        assert config.persona.name == "relay"
        assert logging.getLogger().level == logging.WARNING

    def test_missing_file_keeps_runtime(self, tmp_path: Path) -> None:
        """Test that a missing file keeps the current config."""
        runtime = Mock(spec=RelayRuntime)

        assert not reload_config(runtime, tmp_path / "missing.yaml")

        runtime.update_config.assert_not_called()

    def test_invalid_yaml_keeps_runtime(self, tmp_path: Path) -> None:
        """Test that broken YAML keeps the current config."""
        path = tmp_path / "config.yaml"
        path.write_text("llm: [unclosed", encoding="utf-8")
        runtime = Mock(spec=RelayRuntime)

        assert not reload_config(runtime, path)

        runtime.update_config.assert_not_called()

    def test_invalid_config_keeps_runtime(self, tmp_path: Path) -> None:
        """Test that a missing required field keeps the current config."""
        path = tmp_path / "config.yaml"
        path.write_text("llm:\n  api_key: k\n", encoding="utf-8")
        runtime = Mock(spec=RelayRuntime)

        assert not reload_config(runtime, path)

        runtime.update_config.assert_not_called()

    def test_apply_failure_keeps_runtime(self, tmp_path: Path) -> None:
        """Test that a failure to apply returns False."""
        path = tmp_path / "config.yaml"
        path.write_text(VALID_CONFIG, encoding="utf-8")
        runtime = Mock(spec=RelayRuntime)
        runtime.update_config.side_effect = ConfigError("bad cookies")

        assert not reload_config(runtime, path)
