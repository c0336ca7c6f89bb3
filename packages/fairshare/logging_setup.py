"""Logging for ``fairshare``.

The aggregation core is silent by default: it only reports skipped records
(DEBUG), demo-data substitutions (INFO) and unreadable stores (WARNING) to
the ``"fairshare"`` logger tree. The CLI turns that into stderr output by
calling :func:`configure_logging`; an embedding application can instead
attach its own handlers and never call it.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "fairshare"
_CONFIGURED = False


def _level_from_name(value: str) -> int | None:
    # Numeric strings or standard level names (INFO/DEBUG/etc.).
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    numeric = getattr(logging, value, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        parsed = _level_from_name(level)
        if parsed is not None:
            return parsed
    # Env override when ``level`` is absent or unrecognized
    env_val = os.getenv("FAIRSHARE_LOG_LEVEL")
    if env_val:
        parsed = _level_from_name(env_val)
        if parsed is not None:
            return parsed
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send ``fairshare`` records to ``stream``. Later calls are no-ops.

    ``level`` wins over ``FAIRSHARE_LOG_LEVEL``, which wins over INFO.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a ``fairshare.<module>`` name; quiet until configured."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
