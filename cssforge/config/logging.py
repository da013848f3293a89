"""Opt-in structlog configuration for cssforge.

The library only emits events through ``structlog.get_logger``; nothing is
configured on import. Applications that want cssforge's events rendered call
``setup_logging`` (or ``configure_from_settings`` to read ``CSSFORGE_*`` env vars).
"""

import logging
import sys

import structlog

from cssforge.config.settings import get_settings

LIBRARY_LOGGER = "cssforge"


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """Configure structlog and attach a stream handler to the ``cssforge`` logger.

    The root logger is left alone, so host applications keep their own setup.
    A handler is added only when the logger has none yet.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output or not sys.stderr.isatty():
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    lib_logger = logging.getLogger(LIBRARY_LOGGER)
    lib_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    if not lib_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        lib_logger.addHandler(handler)
    return lib_logger


def configure_from_settings() -> logging.Logger:
    """Apply logging options read from the environment."""
    settings = get_settings()
    return setup_logging(log_level=settings.log_level, json_output=settings.json_logs)
