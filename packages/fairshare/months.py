"""Calendar-month helpers used by the date-bucketed views.

Labels come from a fixed English table rather than the process locale so the
output is identical on every machine.
"""

from __future__ import annotations

import re
from datetime import date, datetime

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_date(value: str) -> date | None:
    """Parse an ISO-8601 date or datetime string; ``None`` when invalid.

    Accepts ``YYYY-MM-DD``, full ISO datetimes (with or without offset) and
    bare ``YYYY-MM``. The calendar fields are taken as written; offsets are
    not converted.
    """

    s = value.strip()
    if not s:
        return None
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    m = _YEAR_MONTH_RE.match(s)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), 1)
        except ValueError:
            return None
    return None


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def month_label(key: str) -> str:
    """``"2024-02"`` → ``"Feb"``."""

    _, month = key.split("-", 1)
    return MONTH_ABBREVIATIONS[int(month) - 1]


__all__ = ["MONTH_ABBREVIATIONS", "parse_date", "month_key", "month_label"]
