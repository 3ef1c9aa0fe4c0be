"""Logging configuration."""

import logging
import sys
from typing import List

import structlog

ENGINE_LOGGER = "profile_engine"


def _processors(json_format: bool) -> List:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer(),
    ]


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Setup structured logging for the engine.

    Engine modules log through stdlib loggers under ``profile_engine``;
    structured events (missing-trait diagnostics) go through structlog bound
    to the same stdlib hierarchy, so one level setting governs both.
    """
    log_level = getattr(logging, level.upper())

    structlog.configure(
        processors=_processors(json_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s" if json_format else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        level=log_level
    )
    logging.getLogger(ENGINE_LOGGER).setLevel(log_level)
