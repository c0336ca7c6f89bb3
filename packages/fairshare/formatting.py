"""Plain-text presentation helpers used by the CLI.

Money is shown in USD with two decimals; share percentages with one.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .models import AggregateSeries


def format_money(value: Any) -> str:
    """``1234.5`` → ``"$1,234.50"``; anything non-numeric renders as ``"$0.00"``."""

    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return "$0.00"
    if isinstance(value, float) and not math.isfinite(value):
        return "$0.00"
    q = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if q == 0:
        return "$0.00"
    sign = "-" if q < 0 else ""
    return f"{sign}${abs(q):,.2f}"


def share_percentages(series: AggregateSeries) -> list[float]:
    """Each value as a percentage of the series total, one decimal place."""

    total = series.total() or 1
    return [round(v / total * 100, 1) for v in series.values]


def render_table(series: AggregateSeries, *, title: str, with_percent: bool = False) -> str:
    heading = f"{title} (demo data)" if series.is_fallback else title
    lines = [heading, "-" * len(heading)]
    if not len(series):
        return "\n".join(lines)

    label_w = max(len(label) for label in series.labels)
    money = [format_money(v) for v in series.values]
    money_w = max(len(m) for m in money)
    pcts = share_percentages(series) if with_percent else None
    for i, label in enumerate(series.labels):
        row = f"{label:<{label_w}}  {money[i]:>{money_w}}"
        if pcts is not None:
            row += f"  {pcts[i]:>5.1f}%"
        lines.append(row)
    return "\n".join(lines)


__all__ = ["format_money", "share_percentages", "render_table"]
