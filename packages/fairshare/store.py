"""Read the persisted expense collection.

The store is a single JSON document. Two shapes are accepted:

- a top-level list of expense entries;
- an object holding that list under ``"fairshare_expenses"`` (the key used by
  the browser-side store this format originates from).

Reading never fails: a missing file, an unreadable file, invalid JSON or a
payload that is not a list all yield ``[]``.

Store location (default ``./fairshare_expenses.json``) can be overridden with
the ``FAIRSHARE_STORE_PATH`` environment variable.
"""

from __future__ import annotations

import json
import os
from os import PathLike
from pathlib import Path
from typing import Any

from .logging_setup import get_logger

STORE_KEY = "fairshare_expenses"
DEFAULT_STORE_FILENAME = "fairshare_expenses.json"

_logger = get_logger("fairshare.store")


def get_store_path() -> Path:
    """Return the store path from ``FAIRSHARE_STORE_PATH`` or the CWD default."""

    env = os.getenv("FAIRSHARE_STORE_PATH")
    if env and env.strip():
        return Path(env.strip()).expanduser()
    return Path.cwd() / DEFAULT_STORE_FILENAME


def extract_entries(payload: Any) -> list[Any]:
    """Pull the raw entry list out of a decoded store document."""

    if isinstance(payload, dict) and STORE_KEY in payload:
        payload = payload[STORE_KEY]
    if not isinstance(payload, list):
        _logger.warning("Expense store does not hold a list (%s); using []", type(payload).__name__)
        return []
    return payload


def load_raw_expenses(path: str | PathLike[str] | None = None) -> list[Any]:
    """Load raw expense entries from ``path`` (or :func:`get_store_path`)."""

    p = Path(path) if path is not None else get_store_path()
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        _logger.debug("Expense store not found at %s; using []", p)
        return []
    except (OSError, UnicodeDecodeError) as exc:
        _logger.warning("Could not read expense store %s: %s", p, exc)
        return []

    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, integer literals past the int digit limit, and
        # nesting deeper than the interpreter stack
        _logger.warning("Expense store %s is not valid JSON: %s", p, exc)
        return []
    return extract_entries(payload)


__all__ = [
    "STORE_KEY",
    "DEFAULT_STORE_FILENAME",
    "get_store_path",
    "extract_entries",
    "load_raw_expenses",
]
