"""
utils/logging_setup.py
----------------------

Central logging configuration for the phrase trainer.

Goals:
- Provide a single place to configure log level and rendering.
- Keep modules free of setup code; they log through
      logger = structlog.get_logger()
- Take overrides from the application settings:
      PT_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      PT_LOG_FORMAT  ("console" for development, "json" for machines)

Usage
=====

In your module:

    import structlog

    logger = structlog.get_logger()

    logger.info("phrase_generated", pattern_id=pattern.id)

In your CLI script (optional):

    from utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()

Implementation notes
====================

- Events are emitted through `structlog`; the standard library `logging`
  module is configured underneath it so third-party log records share the
  same level and stream.
- `init_logging` is idempotent; calling it multiple times is safe.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from app.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    return getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)


def init_logging(
    level: Optional[int] = None,
    log_format: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize structlog and the root stdlib logger.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            settings.LOG_LEVEL, defaulting to INFO.
        log_format:
            "console" or "json". If None, settings.LOG_FORMAT is used.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    resolved_level = _resolve_level(level)
    fmt = LogFormat(log_format or settings.LOG_FORMAT)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt is LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=resolved_level,
        force=True,
    )

    _INITIALIZED = True


__all__ = ["init_logging"]
