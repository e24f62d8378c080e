"""Log rendering for the ``c2h`` loggers.

Modules log through plain ``logging.getLogger(__name__)``; records are
rendered by structlog, as console lines or as JSON (``C2H_LOG_JSON=1``).
"""

import logging
import sys
from typing import List, Optional

import structlog

from c2h.config import Settings, get_settings

LOGGER_NAME = "c2h"


def _level(settings: Settings) -> int:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")
    return level


def _pre_chain() -> List[structlog.types.Processor]:
    """Processors run on every record before rendering."""
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def build_handler(settings: Settings) -> logging.Handler:
    """A stderr handler rendering stdlib records through structlog."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings),
        ],
    ))
    return handler


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach the structlog handler to the ``c2h`` logger and return it.

    Only the package logger is touched; the host application's root logger
    keeps its own configuration. Calling this again replaces the handler.
    """
    settings = settings or get_settings()
    level = _level(settings)
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(build_handler(settings))
    logger.setLevel(level)
    logger.propagate = False
    return logger
