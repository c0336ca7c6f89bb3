"""Public interface for the ``fairshare`` package.

Symbol re-exports only; see :mod:`fairshare.api` for the entry points and
:mod:`fairshare.aggregate` for the chart views themselves.
"""

from .api import (
    build_chart_data,
    category_totals,
    chart_payload_json,
    load_chart_data,
    monthly_totals,
    share_totals,
)
from .models import (
    AggregateSeries,
    ChartData,
    ChartPayload,
    Expense,
    RawExpense,
)
from .normalizers import normalize_expense, normalize_expenses
from .participants import distinct_names, resolve_participants

__all__ = [
    # API
    "build_chart_data",
    "load_chart_data",
    "chart_payload_json",
    "monthly_totals",
    "category_totals",
    "share_totals",
    "normalize_expense",
    "normalize_expenses",
    "distinct_names",
    "resolve_participants",
    # Models / types
    "RawExpense",
    "Expense",
    "AggregateSeries",
    "ChartData",
    "ChartPayload",
]
