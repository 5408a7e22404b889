"""structlog configuration."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to render key/value events to the console.

    Args:
        level: Minimum level name, e.g. ``"INFO"`` or ``"DEBUG"``.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=True,
    )
