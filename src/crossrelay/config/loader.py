"""YAML configuration loading with environment variable expansion."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from crossrelay.config.models import (
    ActionsConfig,
    Config,
    FarcasterConfig,
    LLMConfig,
    LoggingConfig,
    MemoryConfig,
    PersonaConfig,
    SchedulerConfig,
    ServerConfig,
    TelegramConfig,
    TriggerConfig,
    TwitterConfig,
)


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigValidationError(ConfigError):
    """A configuration value failed validation."""


class EnvironmentVariableError(ConfigError):
    """A referenced environment variable is not set."""


# Matches ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """Replace ${VAR_NAME} in a string with the environment value.

    Args:
        value: String to expand.

    Returns:
        The expanded string.

    Raises:
        EnvironmentVariableError: If a referenced variable is not set.
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """Recursively expand environment variables in every string of a structure."""
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """Return a required field or fail.

    Args:
        data: Mapping to read from.
        field: Field name.
        parent: Dotted parent path for error messages.

    Returns:
        The field value.

    Raises:
        ConfigValidationError: If the field is missing.
    """
    if field not in data or data[field] is None or data[field] == "":
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _as_bool(value: Any) -> bool:
    """Interpret YAML booleans and expanded env strings ("true", "1")."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _load_llm(data: dict[str, Any]) -> LLMConfig:
    default = LLMConfig()
    return LLMConfig(
        model=data.get("model", default.model),
        api_key=data.get("api_key") or None,
        api_base=data.get("api_base") or None,
        temperature=float(data.get("temperature", default.temperature)),
        max_tokens=int(data.get("max_tokens", default.max_tokens)),
    )


def _load_telegram(data: dict[str, Any]) -> TelegramConfig:
    enabled = _as_bool(data.get("enabled", False))
    if not enabled:
        return TelegramConfig()
    return TelegramConfig(
        enabled=True,
        bot_token=_validate_required_field(data, "bot_token", "telegram"),
        webhook_secret=data.get("webhook_secret", ""),
        api_base_url=data.get("api_base_url", TelegramConfig.api_base_url),
    )


def _load_farcaster(data: dict[str, Any]) -> FarcasterConfig:
    enabled = _as_bool(data.get("enabled", False))
    if not enabled:
        return FarcasterConfig()
    return FarcasterConfig(
        enabled=True,
        fid=str(_validate_required_field(data, "fid", "farcaster")),
        neynar_api_key=_validate_required_field(data, "neynar_api_key", "farcaster"),
        signer_uuid=_validate_required_field(data, "signer_uuid", "farcaster"),
        api_base_url=data.get("api_base_url", FarcasterConfig.api_base_url),
    )


def _load_twitter(data: dict[str, Any]) -> TwitterConfig:
    enabled = _as_bool(data.get("enabled", False))
    use_browser = _as_bool(data.get("use_browser", False))
    if use_browser:
        return TwitterConfig(
            enabled=enabled,
            use_browser=True,
            cookies=_validate_required_field(data, "cookies", "twitter"),
        )
    if not enabled:
        return TwitterConfig()
    return TwitterConfig(
        enabled=True,
        api_key=_validate_required_field(data, "api_key", "twitter"),
        api_key_secret=_validate_required_field(data, "api_key_secret", "twitter"),
        access_token=_validate_required_field(data, "access_token", "twitter"),
        access_token_secret=_validate_required_field(
            data, "access_token_secret", "twitter"
        ),
    )


def _load_actions(data: dict[str, Any]) -> ActionsConfig:
    default = ActionsConfig()
    return ActionsConfig(
        market_api_url=data.get("market_api_url", default.market_api_url),
        market_api_key=data.get("market_api_key") or None,
        etf_flows_url=data.get("etf_flows_url") or None,
        timeout_seconds=float(data.get("timeout_seconds", default.timeout_seconds)),
    )


def _load_scheduler(data: dict[str, Any]) -> SchedulerConfig:
    triggers: list[TriggerConfig] = []
    for index, item in enumerate(data.get("triggers") or []):
        parent = f"scheduler.triggers[{index}]"
        triggers.append(
            TriggerConfig(
                cron=_validate_required_field(item, "cron", parent),
                interval_seconds=float(
                    _validate_required_field(item, "interval_seconds", parent)
                ),
                initial_delay_seconds=float(item.get("initial_delay_seconds", 0.0)),
            )
        )
    for trigger in triggers:
        if trigger.interval_seconds <= 0:
            raise ConfigValidationError(
                f"Trigger '{trigger.cron}' must have a positive interval_seconds"
            )
    return SchedulerConfig(
        enabled=_as_bool(data.get("enabled", False)),
        triggers=tuple(triggers),
    )


def load_config(path: str | Path) -> Config:
    """Load the configuration file.

    Args:
        path: Path to config.yaml.

    Returns:
        The loaded Config.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If a required field is missing.
        EnvironmentVariableError: If a referenced variable is not set.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    # Expand environment variables
    data = _expand_recursive(raw_data)

    # Required sections
    llm_data = _validate_required_field(data, "llm")
    persona_data = _validate_required_field(data, "persona")
    memory_data = _validate_required_field(data, "memory")

    # PersonaConfig
    persona = PersonaConfig(
        name=_validate_required_field(persona_data, "name", "persona"),
        system_prompt=_validate_required_field(
            persona_data, "system_prompt", "persona"
        ),
    )

    # MemoryConfig
    history_limit = memory_data.get("history_limit")
    memory = MemoryConfig(
        database_path=_validate_required_field(memory_data, "database_path", "memory"),
        history_limit=int(history_limit) if history_limit is not None else None,
        long_term_ttl_seconds=int(
            memory_data.get(
                "long_term_ttl_seconds", MemoryConfig.long_term_ttl_seconds
            )
        ),
    )
    if memory.history_limit is not None and memory.history_limit < 0:
        raise ConfigValidationError("memory.history_limit must not be negative")

    server_data = data.get("server") or {}
    server = ServerConfig(
        host=server_data.get("host", ServerConfig.host),
        port=int(server_data.get("port", ServerConfig.port)),
    )

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get(
                "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            loggers=logging_data.get("loggers"),
            debug_llm_messages=_as_bool(logging_data.get("debug_llm_messages", False)),
        )

    return Config(
        llm=_load_llm(llm_data),
        persona=persona,
        memory=memory,
        telegram=_load_telegram(data.get("telegram") or {}),
        farcaster=_load_farcaster(data.get("farcaster") or {}),
        twitter=_load_twitter(data.get("twitter") or {}),
        actions=_load_actions(data.get("actions") or {}),
        scheduler=_load_scheduler(data.get("scheduler") or {}),
        server=server,
        logging=logging_config,
    )
