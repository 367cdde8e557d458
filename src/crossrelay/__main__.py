"""Application entry point."""

import asyncio
import logging
import signal
import sys
from pathlib import Path

import yaml

from crossrelay.application.services import Scheduler
from crossrelay.config import ConfigError, LoggingConfig, load_config
from crossrelay.infrastructure.events import TriggerLoop
from crossrelay.infrastructure.http import WebhookServer
from crossrelay.infrastructure.persistence import DatabaseManager, SQLiteMemoryStore
from crossrelay.presentation import WebhookHandlers
from crossrelay.runtime import RelayRuntime

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config.yaml")


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    # Get root logger
    root_logger = logging.getLogger()

    # Set root level
    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    # Configure individual loggers
    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def reload_config(runtime: RelayRuntime, config_path: Path) -> bool:
    """Reload the configuration file into the runtime.

    The current runtime stays in place if the file cannot be loaded or
    applied. Scheduler triggers and the server address are read at startup
    only.

    Args:
        runtime: Runtime to reconfigure.
        config_path: Configuration file path.

    Returns:
        True if the new configuration was applied.
    """
    try:
        config = load_config(config_path)
        runtime.update_config(config)
    except (ConfigError, OSError, yaml.YAMLError) as e:
        logger.error("Failed to reload config, keeping current: %s", e)
        return False

    configure_logging(config.logging)
    logger.info("Configuration reloaded from %s", config_path)
    return True


async def main() -> None:
    """Start the application."""
    if not CONFIG_PATH.exists():
        logger.error("config.yaml not found")
        sys.exit(1)

    try:
        config = load_config(CONFIG_PATH)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        sys.exit(1)

    # Apply logging configuration
    configure_logging(config.logging)

    # Initialize database
    db_manager = DatabaseManager(config.memory.database_path)
    await db_manager.create_tables()

    memory_store = SQLiteMemoryStore(
        db_manager.get_session,
        default_ttl=config.memory.long_term_ttl_seconds,
    )

    try:
        runtime = RelayRuntime(config, memory_store)
    except ConfigError as e:
        logger.error("Failed to build runtime: %s", e)
        await db_manager.close()
        sys.exit(1)

    trigger_loop: TriggerLoop | None = None
    if config.scheduler.enabled and config.scheduler.triggers:
        scheduler = Scheduler(lambda: runtime.current.jobs)
        trigger_loop = TriggerLoop(scheduler, config.scheduler.triggers)

    handlers = WebhookHandlers(lambda: runtime.current)
    server = WebhookServer(
        handlers.routes(),
        db_manager,
        trigger_loop=trigger_loop,
        host=config.server.host,
        port=config.server.port,
    )

    logger.info("Starting %s...", config.persona.name)
    await server.start()

    trigger_task: asyncio.Task[None] | None = None
    if trigger_loop is not None:
        logger.info(
            "Starting trigger loop (%d trigger(s))...",
            len(config.scheduler.triggers),
        )
        trigger_task = asyncio.create_task(trigger_loop.start())

    # Setup signal handlers for graceful shutdown and reload
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    def reload_handler() -> None:
        logger.info("Received reload signal...")
        reload_config(runtime, CONFIG_PATH)

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)
    loop.add_signal_handler(signal.SIGHUP, reload_handler)

    # Wait for shutdown signal
    await stop_event.wait()

    # Graceful shutdown
    logger.info("Shutting down...")

    if trigger_loop is not None:
        await trigger_loop.stop()
    await server.stop()

    if trigger_task is not None:
        trigger_task.cancel()
        await asyncio.gather(trigger_task, return_exceptions=True)

    # Close database connections
    await db_manager.close()

    logger.info("Shutdown complete")


def run() -> None:
    """Run the async main function."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
