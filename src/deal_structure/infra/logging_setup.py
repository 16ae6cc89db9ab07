"""Centralized logging configuration for the ``deal_structure`` package.

Library modules only call ``logging.getLogger(__name__)``; the HTTP app (or a
script) calls ``configure_logging()`` once at startup to attach a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from deal_structure.infra.config import log_level

_PKG_LOGGER_NAME = "deal_structure"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = log_level()
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach a single StreamHandler to the package logger, exactly once.

    ``level`` defaults to ``DEAL_STRUCTURE_LOG_LEVEL`` (``INFO`` when unset).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    # Avoid double emission via the root logger
    logger.propagate = False

    _CONFIGURED = True
