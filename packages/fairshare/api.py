"""Public API for the ``fairshare`` package.

The aggregation functions live in :mod:`fairshare.aggregate` and are
re-exported here; :func:`load_chart_data` adds the store read in front of
them for callers that just want "the charts for what is on disk".
"""

from __future__ import annotations

from os import PathLike

from .aggregate import (  # noqa: F401  (re-export)
    DEFAULT_MONTH_WINDOW,
    build_chart_data,
    category_totals,
    monthly_totals,
    share_totals,
)
from .models import ChartData, ChartPayload
from .store import load_raw_expenses


def load_chart_data(
    path: str | PathLike[str] | None = None, *, window: int = DEFAULT_MONTH_WINDOW
) -> ChartData:
    """Read the expense store and compute the three chart views.

    ``path`` defaults to :func:`fairshare.store.get_store_path`. A missing or
    corrupt store produces demonstration data, never an error.
    """

    return build_chart_data(load_raw_expenses(path), window=window)


def chart_payload_json(data: ChartData, *, indent: int | None = 2) -> str:
    """Serialize chart data to the JSON document consumed by renderers."""

    return ChartPayload.from_chart_data(data).model_dump_json(indent=indent)


__all__ = [
    "build_chart_data",
    "category_totals",
    "chart_payload_json",
    "load_chart_data",
    "monthly_totals",
    "share_totals",
]
