"""
Structured logging configuration using structlog.

Console rendering by default; JSON lines when LOG_JSON is enabled.
"""

import logging
import structlog

from blogmon.config import config


def setup_logging(level: str = None, json_output: bool = None) -> None:
    """
    Configure structlog for the engine.

    Args:
        level: Log level name. Defaults to LOG_LEVEL.
        json_output: Render JSON instead of console output. Defaults to LOG_JSON.
    """
    level = (level or config.LOG_LEVEL).upper()
    json_output = config.LOG_JSON if json_output is None else json_output

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if json_output
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

