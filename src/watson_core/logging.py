from __future__ import annotations

import logging
import sys

import structlog

from watson_core.settings import get_settings


def _resolve_level(level: str | None) -> int:
    name = level if level is not None else get_settings().log_level
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: str | None = None) -> None:
    """Route structlog JSON events through stdlib logging.

    ``level`` defaults to ``Settings.log_level``; events below it are dropped
    by the bound logger before any processor runs.
    """
    logging_level = _resolve_level(level)
    logging.basicConfig(level=logging_level, format="%(message)s", stream=sys.stdout)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
