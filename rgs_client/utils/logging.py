"""Logging helpers for the RGS client.

The library only creates loggers under ``rgs_client``. Levels and handlers
belong to the embedding application; ``setup_logging`` is a convenience for
scripts that have no logging setup of their own.
"""

import logging
import os
import sys

from pydantic import BaseModel

LIBRARY_LOGGER = "rgs_client"

# Transport internals are noisy at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


class LogConfig(BaseModel):
    """Logging configuration for scripts using the client."""

    level: str = "INFO"
    client_level: str | None = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: LogConfig | None = None) -> None:
    """Configure the root logger and the client loggers.

    ``client_level`` falls back to LOG_LEVEL, then to ``level``.
    """
    if config is None:
        config = LogConfig()

    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
        datefmt=config.date_format,
        stream=sys.stdout,
        force=True,
    )

    client_level = config.client_level or os.getenv("LOG_LEVEL") or config.level
    logging.getLogger(LIBRARY_LOGGER).setLevel(client_level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger for a specific module.

    The level is left untouched unless ``level`` is given or LOG_LEVEL is set,
    so levels configured by the application are kept.

    Args:
        name: Module name (typically __name__)
        level: Explicit level for this logger

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL")
    if log_level:
        logger.setLevel(log_level.upper())

    return logger
