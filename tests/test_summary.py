from datetime import datetime, timezone
from decimal import Decimal

from backend.core.summary import build_summary, current_month, month_bounds


def test_month_bounds_use_day_31():
    assert month_bounds("2024-02") == ("2024-02-01", "2024-02-31")


def test_short_month_bounds_cover_month_only(store, expense_data):
    for d in ("2024-01-31", "2024-02-01", "2024-02-29", "2024-03-01"):
        store.create_expense(expense_data(date=d, amount="1.00"))
    s = build_summary(store, "2024-02")
    assert s.transaction_count == 2
    assert s.total_spent == Decimal("2.00")


def test_coffee_scenario(store, expense_data):
    store.create_expense(expense_data())
    store.create_budget({"amount": "100.00", "month": "2024-03"})

    s = build_summary(store, "2024-03")
    assert s.month == "2024-03"
    assert s.total_spent == Decimal("4.50")
    assert s.budget_amount == Decimal("100.00")
    assert s.budget_remaining == Decimal("95.50")
    assert s.budget_percentage == 5
    assert s.transaction_count == 1
    assert s.category_totals == {"food": Decimal("4.50")}


def test_no_budget_means_zero_percentage(store, expense_data):
    store.create_expense(expense_data(amount="80.00"))
    s = build_summary(store, "2024-03")
    assert s.budget_amount == 0
    assert s.budget_percentage == 0
    assert s.budget_remaining == Decimal("-80.00")


def test_zero_budget_means_zero_percentage(store, expense_data):
    store.create_expense(expense_data(amount="80.00"))
    store.create_budget({"amount": "0.00", "month": "2024-03"})
    assert build_summary(store, "2024-03").budget_percentage == 0


def test_percentage_rounds_half_up(store, expense_data):
    store.create_expense(expense_data(amount="1.00"))
    store.create_budget({"amount": "8.00", "month": "2024-03"})
    # 12.5% -> 13
    assert build_summary(store, "2024-03").budget_percentage == 13


def test_overspend(store, expense_data):
    store.create_expense(expense_data(amount="150.00"))
    store.create_budget({"amount": "100.00", "month": "2024-03"})
    s = build_summary(store, "2024-03")
    assert s.budget_remaining == Decimal("-50.00")
    assert s.budget_percentage == 150


def test_category_totals_sum_to_total(store, expense_data):
    store.create_expense(expense_data(amount="0.10", category="food"))
    store.create_expense(expense_data(amount="0.20", category="transport", date="2024-03-07"))
    store.create_expense(expense_data(amount="0.30", category="food", date="2024-03-09"))
    s = build_summary(store, "2024-03")
    assert sum(s.category_totals.values()) == s.total_spent == Decimal("0.60")


def test_category_totals_first_occurrence_order(store, expense_data):
    store.create_expense(expense_data(category="food", date="2024-03-01"))
    store.create_expense(expense_data(category="shopping", date="2024-03-20"))
    store.create_expense(expense_data(category="food", date="2024-03-10"))
    s = build_summary(store, "2024-03")
    # expenses come newest first
    assert list(s.category_totals) == ["shopping", "food"]


def test_empty_month(store):
    s = build_summary(store, "2030-01")
    assert s.total_spent == 0
    assert s.transaction_count == 0
    assert s.category_totals == {}


def test_defaults_to_current_month(store, expense_data):
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    store.create_expense(expense_data(date=today))
    s = build_summary(store)
    assert s.month == current_month()
    assert s.transaction_count == 1
