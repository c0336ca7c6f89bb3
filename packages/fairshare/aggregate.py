"""The three chart views and the pipeline that produces them.

Each reducer is a single pass over normalized expenses with no state kept
between calls:

- :func:`monthly_totals` — spend per calendar month, most recent months only.
- :func:`category_totals` — spend per category for the latest month with data
  (all-time when no expense has a usable date).
- :func:`share_totals` — each person's equal share of every expense.

An empty result is replaced by the matching demonstration series from
:mod:`fairshare.fixtures`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .fixtures import DEMO_CATEGORY, DEMO_MONTHLY, DEMO_SHARE, with_fallback
from .logging_setup import get_logger
from .models import AggregateSeries, ChartData, Expense
from .months import month_key, month_label, parse_date
from .normalizers import normalize_expenses
from .participants import distinct_names, resolve_participants

_logger = get_logger("fairshare.aggregate")

DEFAULT_MONTH_WINDOW = 9
UNCATEGORIZED = "Uncategorized"


def _expense_month(e: Expense) -> str | None:
    d = parse_date(e.date) if e.date else None
    return month_key(d) if d is not None else None


def _monthly_map(expenses: Sequence[Expense]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for e in expenses:
        if not e.amount:
            continue
        key = _expense_month(e)
        if key is None:
            _logger.debug("Expense %r has no usable date; skipped for monthly view", e.id)
            continue
        totals[key] = totals.get(key, 0.0) + e.amount
    return totals


def month_keys(expenses: Sequence[Expense]) -> list[str]:
    """Sorted ``YYYY-MM`` keys of every month holding a non-zero, dated expense."""

    return sorted(_monthly_map(expenses))


def monthly_totals(
    expenses: Sequence[Expense], *, window: int = DEFAULT_MONTH_WINDOW
) -> AggregateSeries:
    """Total spend for each of the ``window`` most recent months present."""

    if window < 1:
        raise ValueError("window must be a positive integer")
    totals = _monthly_map(expenses)
    recent = sorted(totals)[-window:]
    return with_fallback(
        {k: totals[k] for k in recent}, DEMO_MONTHLY, view="monthly", label=month_label
    )


def category_totals(expenses: Sequence[Expense]) -> AggregateSeries:
    """Spend per category for the most recent month with dated expenses."""

    keys = month_keys(expenses)
    recent = keys[-1] if keys else None

    totals: dict[str, float] = {}
    for e in expenses:
        if not e.amount:
            continue
        if recent is not None and _expense_month(e) != recent:
            continue
        key = e.category or UNCATEGORIZED
        totals[key] = totals.get(key, 0.0) + e.amount
    return with_fallback(totals, DEMO_CATEGORY, view="category")


def share_totals(expenses: Sequence[Expense]) -> AggregateSeries:
    """Each person's accumulated equal share across all expenses."""

    everyone = distinct_names(expenses)
    totals: dict[str, float] = {}
    for e in expenses:
        if not e.amount:
            continue
        names = [n for n in resolve_participants(e, everyone) if n]
        if not names:
            continue
        share = e.amount / len(names)
        for name in names:
            totals[name] = totals.get(name, 0.0) + share
    return with_fallback(totals, DEMO_SHARE, view="share")


def build_chart_data(raw: Any, *, window: int = DEFAULT_MONTH_WINDOW) -> ChartData:
    """Normalize ``raw`` and compute all three views.

    ``raw`` is whatever was read from the store; anything that is not a list
    is treated as no data. A non-positive ``window`` is replaced by :data:`DEFAULT_MONTH_WINDOW`.
    """

    if window < 1:
        _logger.warning("Invalid month window %r; using %d", window, DEFAULT_MONTH_WINDOW)
        window = DEFAULT_MONTH_WINDOW
    expenses = normalize_expenses(raw)
    _logger.debug("Aggregating %d expenses", len(expenses))
    return ChartData(
        monthly=monthly_totals(expenses, window=window),
        category=category_totals(expenses),
        share=share_totals(expenses),
    )


__all__ = [
    "DEFAULT_MONTH_WINDOW",
    "UNCATEGORIZED",
    "month_keys",
    "monthly_totals",
    "category_totals",
    "share_totals",
    "build_chart_data",
]
