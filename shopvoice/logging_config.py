"""
Structured logging for shopvoice, structlog wrapping stdlib.

Library modules log through ``logging.getLogger(__name__)``; this module
decides how those records are rendered. Console output is the default, and
SHOPVOICE_LOG_FORMAT=json switches to one JSON object per line.

Per-request fields (language, user id) are bound with
``structlog.contextvars`` and show up on every record emitted while the
request is being processed.

Usage:
    from shopvoice.logging_config import setup_logging
    setup_logging()
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

LEVEL_ENV_VAR = "SHOPVOICE_LOG_LEVEL"
FORMAT_ENV_VAR = "SHOPVOICE_LOG_FORMAT"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route all stdlib logging through a structlog formatter.

    Args:
        level: Level name; defaults to $SHOPVOICE_LOG_LEVEL, then INFO
        json_output: Render JSON lines; defaults to $SHOPVOICE_LOG_FORMAT == "json"
        stream: Where to write; defaults to stderr so stdout stays clean for --json

    Returns:
        The installed root handler
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if json_output is None:
        json_output = os.environ.get(FORMAT_ENV_VAR, "").lower() == "json"

    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain runs on records from plain logging.getLogger() loggers
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


__all__ = ["setup_logging"]
