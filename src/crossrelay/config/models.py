"""Configuration dataclasses.

All configuration objects are frozen. A running relay never mutates them;
reconfiguration builds a new ``Config`` and swaps it in wholesale.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LLMConfig:
    """LLM settings (passed to litellm completion)."""

    model: str = "openrouter/openai/gpt-3.5-turbo"
    api_key: str | None = None
    api_base: str | None = None
    temperature: float = 0.7
    max_tokens: int = 700


@dataclass(frozen=True)
class PersonaConfig:
    """Persona settings."""

    name: str
    system_prompt: str


@dataclass(frozen=True)
class MemoryConfig:
    """Memory store settings.

    Attributes:
        database_path: SQLite database path (":memory:" for in-memory).
        history_limit: Maximum number of recent conversation turns loaded
            into the model context. None loads the full history.
        long_term_ttl_seconds: Default TTL for new long-term memory entries.
    """

    database_path: str
    history_limit: int | None = None
    long_term_ttl_seconds: int = 60 * 60 * 24 * 30


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram bot settings."""

    enabled: bool = False
    bot_token: str = ""
    webhook_secret: str = ""
    api_base_url: str = "https://api.telegram.org"


@dataclass(frozen=True)
class FarcasterConfig:
    """Farcaster (Neynar) settings."""

    enabled: bool = False
    fid: str = ""
    neynar_api_key: str = ""
    signer_uuid: str = ""
    api_base_url: str = "https://api.neynar.com"


@dataclass(frozen=True)
class TwitterConfig:
    """Twitter settings.

    ``use_browser`` selects the cookie-session client over the credentialed
    API client.
    """

    enabled: bool = False
    use_browser: bool = False
    api_key: str = ""
    api_key_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""
    cookies: str = ""


@dataclass(frozen=True)
class ActionsConfig:
    """Settings for built-in actions and their data sources."""

    market_api_url: str = "https://api.coingecko.com/api/v3"
    market_api_key: str | None = None
    etf_flows_url: str | None = None
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class TriggerConfig:
    """An in-process schedule trigger.

    Attributes:
        cron: Schedule expression delivered to the scheduler.
        interval_seconds: How often the expression fires.
        initial_delay_seconds: Delay before the first firing.
    """

    cron: str
    interval_seconds: float
    initial_delay_seconds: float = 0.0


@dataclass(frozen=True)
class SchedulerConfig:
    """Scheduler settings."""

    enabled: bool = False
    triggers: tuple[TriggerConfig, ...] = ()


@dataclass(frozen=True)
class ServerConfig:
    """Webhook server settings."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None
    debug_llm_messages: bool = False


@dataclass(frozen=True)
class Config:
    """Application configuration snapshot."""

    llm: LLMConfig
    persona: PersonaConfig
    memory: MemoryConfig
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    farcaster: FarcasterConfig = field(default_factory=FarcasterConfig)
    twitter: TwitterConfig = field(default_factory=TwitterConfig)
    actions: ActionsConfig = field(default_factory=ActionsConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig | None = None
