from frontend.views import (
    budget_vs_actual,
    category_breakdown,
    filter_expenses,
    format_category_name,
    format_money,
    format_month_display,
    monthly_trend,
    overview_stats,
    paginate,
)


def expense(id, date, category="food", amount="10.00"):
    return {
        "id": id,
        "description": f"expense {id}",
        "amount": amount,
        "category": category,
        "date": date,
        "notes": None,
        "createdAt": "2024-03-05T10:00:00Z",
    }


def summary(**kwargs):
    base = {
        "totalSpent": 4.5,
        "budgetAmount": 100.0,
        "budgetRemaining": 95.5,
        "budgetPercentage": 5,
        "transactionCount": 1,
        "categoryTotals": {"food": 4.5},
        "month": "2024-03",
    }
    base.update(kwargs)
    return base


def test_formatting():
    assert format_category_name("healthcare") == "Healthcare"
    assert format_category_name("unknown") == "unknown"
    assert format_money("1234.5") == "$1,234.50"
    assert format_month_display("2024-03") == "March 2024"
    assert format_month_display("") == ""


def test_filter_expenses():
    items = [
        expense(1, "2024-03-01", "food"),
        expense(2, "2024-03-02", "transport"),
        expense(3, "2024-03-02", "food"),
    ]
    assert len(filter_expenses(items)) == 3
    assert len(filter_expenses(items, "all")) == 3
    assert [e["id"] for e in filter_expenses(items, "food")] == [1, 3]
    assert [e["id"] for e in filter_expenses(items, day="2024-03-02")] == [2, 3]
    assert [e["id"] for e in filter_expenses(items, "food", "2024-03-02")] == [3]


def test_paginate():
    items = list(range(23))
    page, total = paginate(items, 1, per_page=10)
    assert page == list(range(10))
    assert total == 3
    assert paginate(items, 3, per_page=10)[0] == [20, 21, 22]
    # out of range pages are clamped
    assert paginate(items, 9, per_page=10)[0] == [20, 21, 22]
    assert paginate([], 1) == ([], 1)


def test_monthly_trend():
    items = [
        expense(1, "2024-03-05", amount="4.50"),
        expense(2, "2024-03-20", amount="5.50"),
        expense(3, "2024-01-10", amount="7.00"),
        expense(4, "2023-06-01", amount="99.00"),
    ]
    trend = monthly_trend(items, "2024-03")
    assert list(trend["month"]) == ["2023-10", "2023-11", "2023-12", "2024-01", "2024-02", "2024-03"]
    assert list(trend["label"]) == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
    assert list(trend["total"]) == [0.0, 0.0, 0.0, 7.0, 0.0, 10.0]


def test_monthly_trend_without_expenses():
    trend = monthly_trend([], "2024-03", months=3)
    assert list(trend["total"]) == [0.0, 0.0, 0.0]


def test_category_breakdown():
    df = category_breakdown(summary(categoryTotals={"shopping": 20.0, "food": 4.5}))
    assert list(df["label"]) == ["Shopping", "Food"]
    assert list(df["total"]) == [20.0, 4.5]
    assert category_breakdown(summary(categoryTotals={})).empty


def test_overview_stats():
    stats = overview_stats(summary())
    assert [s["label"] for s in stats] == ["Total Spent", "Budget Remaining", "Monthly Budget", "Transactions"]
    assert stats[0]["value"] == "$4.50"
    assert stats[1]["caption"] == "96% remaining"
    assert stats[2]["caption"] == "Set for March"
    assert stats[3]["value"] == "1"


def test_overview_stats_without_budget():
    stats = overview_stats(summary(budgetAmount=0.0, budgetRemaining=-4.5, budgetPercentage=0))
    assert stats[1]["caption"] == "0% remaining"


def test_overview_stats_rounds_half_up():
    stats = overview_stats(summary(budgetAmount=8.0, budgetRemaining=1.0, totalSpent=7.0))
    assert stats[1]["caption"] == "13% remaining"
    stats = overview_stats(summary(budgetAmount=8.0, budgetRemaining=5.0, totalSpent=3.0))
    assert stats[1]["caption"] == "63% remaining"


def test_budget_vs_actual():
    items = [
        expense(1, "2024-03-05", amount="4.50"),
        expense(2, "2024-02-11", amount="120.00"),
    ]
    df = budget_vs_actual(summary(), items, "2024-03", months=3)
    assert list(df.columns) == ["month", "label", "budget", "actual"]
    assert list(df["label"]) == ["Jan", "Feb", "Mar"]
    assert list(df["budget"]) == [100.0, 100.0, 100.0]
    assert list(df["actual"]) == [0.0, 120.0, 4.5]


def test_budget_vs_actual_without_budget():
    df = budget_vs_actual(summary(budgetAmount=0.0), [], "2024-03")
    assert len(df) == 6
    assert (df["budget"] == 0.0).all()
    assert (df["actual"] == 0.0).all()
