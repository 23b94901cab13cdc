"""
Structured logging

Modules get their logger with get_logger(__name__). The first call configures
structlog from HEXASTORE_LOG_LEVEL; create_hexastore_index reconfigures it from
Settings, and the later call wins.

The root logger gets one handler owned by this module. Reconfiguring replaces
that handler and sets the root level, leaving other handlers alone.
"""

import logging
import os
from typing import Any

import structlog
from structlog.processors import JSONRenderer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

# Global logger cache
_LOGGER_CACHE: dict[str, Any] = {}
_INITIALIZED = False
_HANDLER: logging.Handler | None = None


def get_log_level() -> str:
    """
    Log level from HEXASTORE_LOG_LEVEL.

    Unknown names fall back to INFO so that importing the package never fails
    on a bad environment; Settings rejects the same value with a ValidationError.
    """
    level = os.getenv("HEXASTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def configure_logging(
    level: str | None = None,
    json_format: bool = False,
) -> None:
    """
    Configure structlog and the root handler.

    Safe to call again: the new level and renderer apply to every logger,
    including the ones already handed out by get_logger.

    Args:
        level: Level name, case-insensitive (None: HEXASTORE_LOG_LEVEL)
        json_format: Render events as JSON lines instead of console output

    Raises:
        ValueError: If level is not a logging level name
    """
    global _INITIALIZED, _HANDLER

    level = get_log_level() if level is None else level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    renderer = JSONRenderer() if json_format else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up a later reconfiguration.
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_HANDLER)
    root.setLevel(level)

    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structlog logger, configuring logging on first use.

    Args:
        name: Logger name (usually __name__)
    """
    if not _INITIALIZED:
        configure_logging()

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = structlog.get_logger(name)
    return _LOGGER_CACHE[name]


def reset_logging() -> None:
    """Undo configure_logging (tests)."""
    global _INITIALIZED, _HANDLER
    if _HANDLER is not None:
        logging.getLogger().removeHandler(_HANDLER)
        _HANDLER = None
    logging.getLogger().setLevel(logging.WARNING)
    _INITIALIZED = False
    _LOGGER_CACHE.clear()
    structlog.reset_defaults()
