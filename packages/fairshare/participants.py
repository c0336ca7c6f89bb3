"""Who shares the cost of an expense.

An expense either lists its participants explicitly or it does not. When it
does not, it is assumed to be shared by everyone who appears anywhere in the
dataset. That "everyone" set depends only on the full expense list, so
callers compute it once per aggregation pass with :func:`distinct_names` and
pass it to :func:`resolve_participants` for each expense.

Names are compared by exact string everywhere except the payer check on an
explicit list, which is case-insensitive. Share totals therefore treat
``"Alex"`` and ``"alex"`` as two people.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Expense


def distinct_names(expenses: Iterable[Expense]) -> tuple[str, ...]:
    """Return every payer and participant name, distinct, in first-seen order."""

    seen: dict[str, None] = {}
    for e in expenses:
        if e.paid_by:
            seen.setdefault(e.paid_by, None)
        for name in e.participants:
            seen.setdefault(name, None)
    return tuple(seen)


def resolve_participants(expense: Expense, everyone: Iterable[str]) -> list[str]:
    """Return the people sharing ``expense``.

    - Explicit participants: returned as listed, with the payer appended when
      no listed name matches it case-insensitively.
    - No participants: ``everyone`` plus this expense's payer if missing.
    """

    payer = expense.paid_by
    if expense.participants:
        names = list(expense.participants)
        if payer and payer.lower() not in {n.lower() for n in names}:
            names.append(payer)
        return names

    names = list(everyone)
    if payer and payer not in names:
        names.append(payer)
    return names


__all__ = ["distinct_names", "resolve_participants"]
