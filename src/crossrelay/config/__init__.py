"""Configuration management."""

from crossrelay.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
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

__all__ = [
    "ActionsConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "FarcasterConfig",
    "LLMConfig",
    "LoggingConfig",
    "MemoryConfig",
    "PersonaConfig",
    "SchedulerConfig",
    "ServerConfig",
    "TelegramConfig",
    "TriggerConfig",
    "TwitterConfig",
    "expand_env_vars",
    "load_config",
]
