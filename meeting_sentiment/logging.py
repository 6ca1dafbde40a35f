"""
Structured logging setup.

Library modules log through :func:`get_logger`, which binds structlog to
the standard library logger of the same name. Events stay silent until
the host application configures logging, usually by calling
:func:`configure_logging` once at start-up.
"""

import logging
import sys
from typing import Optional, Union

import structlog

from .config import LogFormat, get_settings


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[Union[LogFormat, str]] = None,
) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level name; defaults to ``Settings.log_level``.
        fmt: ``json`` or ``console``; defaults to ``Settings.log_format``.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    log_format = LogFormat(fmt) if fmt is not None else settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    if log_format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger backed by ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
