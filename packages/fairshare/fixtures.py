"""Fixed demonstration datasets.

A chart is never rendered empty: when a view computes no data from the real
expenses, the matching series below is substituted via :func:`with_fallback`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .logging_setup import get_logger
from .models import AggregateSeries

_logger = get_logger("fairshare.fixtures")

DEMO_MONTHLY = AggregateSeries(
    labels=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep"),
    values=(520.0, 610.0, 740.0, 680.0, 820.0, 765.0, 810.0, 930.0, 860.0),
    is_fallback=True,
)

DEMO_CATEGORY = AggregateSeries(
    labels=("Food", "Rent", "Travel", "Utilities", "Misc"),
    values=(320.0, 1200.0, 450.0, 300.0, 140.0),
    is_fallback=True,
)

DEMO_SHARE = AggregateSeries(
    labels=("Alex", "Sam", "Priya", "Jin"),
    values=(620.0, 510.0, 430.0, 390.0),
    is_fallback=True,
)


def with_fallback(
    totals: Mapping[str, float],
    fixture: AggregateSeries,
    *,
    view: str,
    label: Callable[[str], str] | None = None,
) -> AggregateSeries:
    """Return ``totals`` as a series, or ``fixture`` when ``totals`` is empty.

    ``label`` renders each key for display. Rendered labels may repeat (two
    Januaries from different years), so keys are only relabelled after the
    totals are final.
    """

    if not totals:
        _logger.info("No %s data computed; using demonstration data", view)
        return fixture
    if label is None:
        return AggregateSeries.from_mapping(totals)
    return AggregateSeries(
        labels=tuple(label(k) for k in totals),
        values=tuple(float(v) for v in totals.values()),
    )


__all__ = ["DEMO_MONTHLY", "DEMO_CATEGORY", "DEMO_SHARE", "with_fallback"]
