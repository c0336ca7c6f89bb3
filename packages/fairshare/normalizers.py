"""Raw store entries → canonical :class:`~fairshare.models.Expense` records.

Normalization is total: it never raises and never drops a record. Every field
has an enumerated default (see ``_FIELD_DEFAULTS``) that is substituted when
the source value is missing or has the wrong type. Records whose fields
cannot be used by a given view (for example an unparseable date) are excluded
by the aggregators, not here.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar

from .logging_setup import get_logger
from .models import Expense, RawExpense

_logger = get_logger("fairshare.normalizers")

T = TypeVar("T")

DEFAULT_STATUS = "Unsettled"

_FIELD_DEFAULTS: dict[str, Any] = {
    "id": "",
    "date": "",
    "description": "",
    "category": "",
    "amount": 0.0,
    "paid_by": "",
    "participants": (),
    "status": DEFAULT_STATUS,
}

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def clean_name(value: Any) -> str:
    """Trim and collapse internal whitespace; non-strings become ``""``."""

    if not isinstance(value, str):
        return ""
    return " ".join(value.split())


def split_names(value: Any) -> tuple[str, ...]:
    """Split a comma-joined name list into cleaned, non-empty names.

    Lists and tuples of strings are accepted as already-split input.
    """

    if isinstance(value, str):
        parts: Sequence[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        return ()
    names = (clean_name(p) for p in parts)
    return tuple(n for n in names if n)


def coerce_amount(value: Any) -> float:
    """Convert ``value`` to a finite, non-negative float.

    Booleans, non-numeric strings, NaN, infinities, numbers too large for a
    float and negative numbers all become ``0.0``.
    """

    if isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif not isinstance(value, (int, float, Decimal)):
        return 0.0
    try:
        number = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range, Decimal("sNaN"), non-numeric strings
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    # Collapse -0.0
    return number + 0.0


def _coerce_id(value: Any) -> str:
    if isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _coerce_date(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return ""


def _coerce_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _first_usable(raw: RawExpense, coerce: Callable[[Any], T], *keys: str) -> T:
    """Coerce each of ``keys`` in turn; return the first non-empty result.

    A wrongly typed primary field (``desc=7``) coerces to empty, so the
    fallback key still gets its turn.
    """

    result = coerce(None)
    for key in keys:
        result = coerce(raw.get(key))
        if result:
            return result
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_expense(raw: Any) -> Expense:
    """Normalize one raw entry. Non-mapping input yields an all-default record."""

    if not isinstance(raw, Mapping):
        _logger.debug("Non-mapping expense entry defaulted: %r", type(raw).__name__)
        raw = {}

    fields: dict[str, Any] = dict(_FIELD_DEFAULTS)
    fields["id"] = _coerce_id(raw.get("id")) or fields["id"]
    fields["date"] = _coerce_date(raw.get("date")) or fields["date"]
    fields["description"] = (
        _first_usable(raw, _coerce_text, "desc", "description") or fields["description"]
    )
    fields["category"] = _coerce_text(raw.get("category")) or fields["category"]
    fields["amount"] = coerce_amount(raw.get("amount"))
    fields["paid_by"] = _first_usable(raw, clean_name, "paidBy", "addedBy")
    fields["participants"] = _first_usable(raw, split_names, "split", "addedTo")
    fields["status"] = _coerce_text(raw.get("status")) or fields["status"]
    return Expense(**fields)


def normalize_expenses(raw: Any) -> list[Expense]:
    """Normalize a raw collection, preserving order.

    Anything that is not a list or tuple (``None``, a mapping, a string, ...)
    is treated as an empty collection.
    """

    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            _logger.debug("Expense collection is not a list (%s); using []", type(raw).__name__)
        return []
    return [normalize_expense(item) for item in raw]


__all__ = [
    "DEFAULT_STATUS",
    "clean_name",
    "split_names",
    "coerce_amount",
    "normalize_expense",
    "normalize_expenses",
]
