"""Data models and type aliases for ``fairshare``.

Three layers are modelled here:

- :data:`RawExpense` — the untrusted, loosely-typed record as persisted by
  the expense form. Kept opaque on purpose; the normalizer owns all field
  interpretation.
- :class:`Expense` — the canonical record every aggregation consumes.
- :class:`AggregateSeries` / :class:`ChartData` — the output boundary handed
  to a presentation layer, plus :class:`ChartPayload`, its validated JSON
  form.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

RawExpense: TypeAlias = Mapping[str, Any]
"""A single expense entry exactly as read from the store.

Known keys: ``id``, ``date``, ``desc``/``description``, ``category``,
``amount``, ``paidBy``/``addedBy``, ``split``/``addedTo`` and ``status``. Any
of them may be absent or carry the wrong type.
"""


@dataclass(frozen=True, slots=True)
class Expense:
    """A normalized expense.

    Attributes
    ----------
    id:
        Identifier from the source record, ``""`` when absent.
    date:
        Date string as provided (expected ISO-8601). May be unparseable; such
        records are only excluded from the date-bucketed views.
    description:
        Free text description.
    category:
        Category label, ``""`` when absent.
    amount:
        Finite, non-negative amount.
    paid_by:
        Cleaned payer name, ``""`` when unknown.
    participants:
        Cleaned, non-empty names listed as sharing the cost. Empty when the
        record did not say.
    status:
        Settlement status, ``"Unsettled"`` by default.
    """

    id: str = ""
    date: str = ""
    description: str = ""
    category: str = ""
    amount: float = 0.0
    paid_by: str = ""
    participants: tuple[str, ...] = ()
    status: str = "Unsettled"


# ---------------------------------------------------------------------------
# Aggregation output
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AggregateSeries:
    """An ordered ``(label, value)`` series ready for charting.

    ``is_fallback`` is true when the series holds fixed demonstration data
    rather than values computed from real expenses.
    """

    labels: tuple[str, ...]
    values: tuple[float, ...]
    is_fallback: bool = False

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"labels and values must have equal length "
                f"({len(self.labels)} != {len(self.values)})"
            )

    def __len__(self) -> int:
        return len(self.labels)

    def pairs(self) -> Iterator[tuple[str, float]]:
        return zip(self.labels, self.values, strict=True)

    def total(self) -> float:
        return sum(self.values)

    @classmethod
    def from_mapping(
        cls, totals: Mapping[str, float], *, is_fallback: bool = False
    ) -> AggregateSeries:
        """Build a series from an insertion-ordered mapping."""

        return cls(
            labels=tuple(totals.keys()),
            values=tuple(float(v) for v in totals.values()),
            is_fallback=is_fallback,
        )


@dataclass(frozen=True, slots=True)
class ChartData:
    """The three views produced by one aggregation pass."""

    monthly: AggregateSeries
    category: AggregateSeries
    share: AggregateSeries

    def as_dict(self) -> dict[str, AggregateSeries]:
        return {"monthly": self.monthly, "category": self.category, "share": self.share}


# ---------------------------------------------------------------------------
# JSON payload for presentation consumers
# ---------------------------------------------------------------------------


class SeriesPayload(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    labels: list[str]
    values: list[float]
    is_fallback: bool = False

    @field_validator("values")
    @classmethod
    def _values_finite(cls, v: list[float]) -> list[float]:
        if not all(math.isfinite(x) for x in v):
            raise ValueError("values must be finite numbers")
        return v

    @model_validator(mode="after")
    def _equal_length(self) -> SeriesPayload:
        if len(self.labels) != len(self.values):
            raise ValueError("labels and values must have equal length")
        return self

    @classmethod
    def from_series(cls, series: AggregateSeries) -> SeriesPayload:
        return cls(
            labels=list(series.labels),
            values=[float(v) for v in series.values],
            is_fallback=series.is_fallback,
        )


class ChartPayload(BaseModel):
    """Top-level JSON document consumed by a chart renderer."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    monthly: SeriesPayload
    category: SeriesPayload
    share: SeriesPayload

    @classmethod
    def from_chart_data(cls, data: ChartData) -> ChartPayload:
        return cls(
            monthly=SeriesPayload.from_series(data.monthly),
            category=SeriesPayload.from_series(data.category),
            share=SeriesPayload.from_series(data.share),
        )


__all__ = [
    "RawExpense",
    "Expense",
    "AggregateSeries",
    "ChartData",
    "SeriesPayload",
    "ChartPayload",
]
