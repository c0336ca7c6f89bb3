import pytest

from fairshare import (
    build_chart_data,
    category_totals,
    monthly_totals,
    normalize_expenses,
    share_totals,
)
from fairshare.aggregate import month_keys
from fairshare.fixtures import DEMO_CATEGORY, DEMO_MONTHLY, DEMO_SHARE


def _exp(date="", amount=0, category="", paid_by="", split=""):
    return {"date": date, "amount": amount, "category": category, "paidBy": paid_by, "split": split}


def _norm(*raw):
    return normalize_expenses(list(raw))


# ---- Monthly -----------------------------------------------------------------


def test_monthly_sums_per_calendar_month():
    expenses = _norm(
        _exp("2024-01-05", 100),
        _exp("2024-01-20", 50),
        _exp("2024-02-01", 30),
    )
    series = monthly_totals(expenses)
    assert series.labels == ("Jan", "Feb")
    assert series.values == (150, 30)
    assert not series.is_fallback


def test_monthly_keeps_only_nine_most_recent_months():
    raw = [_exp(f"2023-{m:02d}-15", m) for m in range(1, 13)]
    series = monthly_totals(normalize_expenses(raw))
    assert series.labels == ("Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    assert series.values == tuple(float(m) for m in range(4, 13))


def test_monthly_orders_across_years_and_allows_repeated_labels():
    expenses = _norm(_exp("2024-01-02", 5), _exp("2023-01-02", 7), _exp("2023-12-31", 1))
    series = monthly_totals(expenses)
    assert series.labels == ("Jan", "Dec", "Jan")
    assert series.values == (7, 1, 5)


def test_monthly_window_is_configurable():
    raw = [_exp(f"2024-{m:02d}-01", 1) for m in range(1, 6)]
    series = monthly_totals(normalize_expenses(raw), window=2)
    assert series.labels == ("Apr", "May")


def test_monthly_rejects_non_positive_window():
    with pytest.raises(ValueError):
        monthly_totals([], window=0)


def test_monthly_skips_invalid_dates_and_zero_amounts():
    expenses = _norm(
        _exp("not a date", 100),
        _exp("", 100),
        _exp("2024-03-01", 0),
        _exp("2024-13-01", 5),
        _exp("2024-03-09T18:30:00Z", 20),
    )
    series = monthly_totals(expenses)
    assert series.labels == ("Mar",)
    assert series.values == (20,)


def test_monthly_accepts_year_month_dates():
    series = monthly_totals(_norm(_exp("2024-06", 12)))
    assert series.labels == ("Jun",)


def test_monthly_without_valid_buckets_uses_demo_data():
    assert monthly_totals(_norm(_exp("bad", 10))) == DEMO_MONTHLY
    assert monthly_totals([]) == DEMO_MONTHLY


def test_month_keys_are_sorted_and_distinct():
    expenses = _norm(_exp("2024-02-01", 1), _exp("2023-11-01", 1), _exp("2024-02-09", 1))
    assert month_keys(expenses) == ["2023-11", "2024-02"]


# ---- Category ----------------------------------------------------------------


def test_category_is_restricted_to_most_recent_month():
    expenses = _norm(
        _exp("2024-01-10", 100, "Food"),
        _exp("2024-02-10", 40, "Food"),
    )
    series = category_totals(expenses)
    assert series.labels == ("Food",)
    assert series.values == (40,)


def test_category_excludes_undated_expenses_when_a_recent_month_exists():
    expenses = _norm(
        _exp("2024-02-10", 40, "Food"),
        _exp("", 500, "Rent"),
        _exp("garbage", 60, "Travel"),
    )
    assert category_totals(expenses).labels == ("Food",)


def test_category_without_dated_expenses_sums_everything():
    expenses = _norm(
        _exp("", 10, "Food"),
        _exp("bad", 5, ""),
        _exp("", 2, "Food"),
        _exp("", 0, "Zero"),
    )
    series = category_totals(expenses)
    assert series.labels == ("Food", "Uncategorized")
    assert series.values == (12, 5)


def test_category_keeps_first_encounter_order():
    expenses = _norm(
        _exp("2024-05-02", 1, "Zeta"),
        _exp("2024-05-03", 2, "Alpha"),
        _exp("2024-05-04", 3, "Zeta"),
    )
    series = category_totals(expenses)
    assert series.labels == ("Zeta", "Alpha")
    assert series.values == (4, 2)


def test_category_empty_uses_demo_data():
    assert category_totals([]) == DEMO_CATEGORY
    assert category_totals(_norm(_exp("", 0, "Food"))) == DEMO_CATEGORY


# ---- Shares ------------------------------------------------------------------


def test_share_equal_split_among_explicit_participants():
    series = share_totals(_norm(_exp(amount=90, split="A, B, C")))
    assert series.labels == ("A", "B", "C")
    assert series.values == pytest.approx((30, 30, 30))


def test_share_fallback_uses_everyone_in_dataset():
    expenses = _norm(
        _exp(amount=90, split="A,B,C"),
        _exp(amount=60),
    )
    series = share_totals(expenses)
    assert series.labels == ("A", "B", "C")
    assert series.values == pytest.approx((50, 50, 50))


def test_share_appends_missing_payer():
    series = share_totals(_norm(_exp(amount=30, paid_by="Alex", split="Sam, Jin")))
    assert dict(series.pairs()) == pytest.approx({"Sam": 10, "Jin": 10, "Alex": 10})


def test_share_keys_people_by_exact_name():
    # "alex" listed explicitly, payer "Alex" matches case-insensitively and is
    # not appended; a later expense paid by "Alex" with no split falls back to
    # everyone, where both spellings are distinct people.
    expenses = _norm(
        _exp(amount=20, paid_by="Alex", split="alex, Sam"),
        _exp(amount=30, paid_by="Alex"),
    )
    series = share_totals(expenses)
    assert series.labels == ("alex", "Sam", "Alex")
    assert series.values == pytest.approx((20, 20, 10))


def test_share_duplicate_names_in_split_accrue_twice():
    series = share_totals(_norm(_exp(amount=30, split="A, A, B")))
    assert dict(series.pairs()) == pytest.approx({"A": 20, "B": 10})


def test_share_ignores_zero_amount_expenses():
    series = share_totals(_norm(_exp(amount=0, split="A"), _exp(amount=10, split="B")))
    assert dict(series.pairs()) == {"B": 10}


def test_zero_amount_expense_still_names_people_for_the_fallback():
    series = share_totals(_norm(_exp(amount=0, split="A"), _exp(amount=50)))
    assert dict(series.pairs()) == {"A": 50}


def test_share_without_any_names_uses_demo_data():
    assert share_totals(_norm(_exp(amount=0), _exp(amount=50))) == DEMO_SHARE


def test_share_empty_uses_demo_data():
    assert share_totals([]) == DEMO_SHARE


# ---- Pipeline ----------------------------------------------------------------


def test_empty_input_yields_every_fixture_exactly():
    data = build_chart_data([])
    assert data.monthly == DEMO_MONTHLY
    assert data.category == DEMO_CATEGORY
    assert data.share == DEMO_SHARE
    assert data.monthly.labels == ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep")
    assert data.monthly.values == (520, 610, 740, 680, 820, 765, 810, 930, 860)
    assert dict(data.category.pairs()) == {
        "Food": 320,
        "Rent": 1200,
        "Travel": 450,
        "Utilities": 300,
        "Misc": 140,
    }
    assert dict(data.share.pairs()) == {"Alex": 620, "Sam": 510, "Priya": 430, "Jin": 390}


@pytest.mark.parametrize("raw", [None, "corrupt", {"fairshare_expenses": []}, 0])
def test_non_list_input_yields_fixtures(raw):
    data = build_chart_data(raw)
    assert (data.monthly, data.category, data.share) == (DEMO_MONTHLY, DEMO_CATEGORY, DEMO_SHARE)


def test_pipeline_is_idempotent_and_does_not_mutate_input():
    raw = [
        {"date": "2024-04-02", "amount": "25", "category": "Food", "paidBy": "A", "split": "A,B"},
        {"date": "2024-03-15", "amount": 75, "paidBy": "C"},
        {"amount": "n/a"},
    ]
    snapshot = [dict(r) for r in raw]
    first = build_chart_data(raw)
    second = build_chart_data(raw)
    assert first == second
    assert raw == snapshot


def test_pipeline_series_are_equal_length_pairs():
    raw = [
        {"date": "2024-04-02", "amount": 25, "category": "Food", "paidBy": "A", "split": "A,B"},
        {"date": "2024-04-09", "amount": 10, "paidBy": "C"},
    ]
    data = build_chart_data(raw)
    for series in data.as_dict().values():
        assert len(series.labels) == len(series.values) > 0
    assert data.monthly.labels == ("Apr",)
    assert data.monthly.values == (35,)
    assert dict(data.category.pairs()) == {"Food": 25, "Uncategorized": 10}
    assert dict(data.share.pairs()) == pytest.approx({"A": 12.5 + 10 / 3, "B": 12.5 + 10 / 3, "C": 10 / 3})


@pytest.mark.parametrize("window", [0, -3])
def test_pipeline_replaces_non_positive_window_with_default(window):
    raw = [_exp(f"2023-{m:02d}-15", m) for m in range(1, 13)]
    data = build_chart_data(raw, window=window)
    assert len(data.monthly) == 9
    assert data.monthly.labels[-1] == "Dec"


def test_pipeline_survives_amount_too_large_for_float():
    raw = [_exp("2024-01-01", 10**400, "Food", split="A"), _exp("2024-01-02", 5, "Food", split="A")]
    data = build_chart_data(raw)
    assert data.monthly.values == (5,)
    assert dict(data.share.pairs()) == {"A": 5}
