# frontend/views.py
"""Presentation helpers for the dashboard. No streamlit imports here."""
from __future__ import annotations

import datetime as dt
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from frontend.config import PAGE_SIZE

CATEGORY_LABELS = {
    "food": "Food",
    "transport": "Transport",
    "entertainment": "Entertainment",
    "utilities": "Utilities",
    "shopping": "Shopping",
    "healthcare": "Healthcare",
    "other": "Other",
}

CATEGORY_COLORS = {
    "food": "#10B981",
    "transport": "#3B82F6",
    "entertainment": "#8B5CF6",
    "utilities": "#F59E0B",
    "shopping": "#EC4899",
    "healthcare": "#EF4444",
    "other": "#6B7280",
}


def format_category_name(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def format_money(value: Any) -> str:
    return f"${float(value):,.2f}"


def format_month_display(month: str) -> str:
    """'2024-03' -> 'March 2024'; empty string for empty input."""
    if not month:
        return ""
    return dt.datetime.strptime(month, "%Y-%m").strftime("%B %Y")


def filter_expenses(
    expenses: List[Dict[str, Any]],
    category: Optional[str] = None,
    day: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Client-side filters of the expense table. "all" or empty means no filter."""
    def keep(e):
        if category and category != "all" and e["category"] != category:
            return False
        if day and e["date"] != day:
            return False
        return True
    return [e for e in expenses if keep(e)]


def paginate(items: List[Any], page: int, per_page: int = PAGE_SIZE) -> Tuple[List[Any], int]:
    """Return (items on `page`, total pages). Pages start at 1 and are clamped."""
    total_pages = max(1, math.ceil(len(items) / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return items[start:start + per_page], total_pages


def expenses_frame(expenses: List[Dict[str, Any]]) -> pd.DataFrame:
    cols = ["id", "date", "description", "category", "amount", "notes"]
    if not expenses:
        return pd.DataFrame(columns=cols + ["month"])
    df = pd.DataFrame(expenses)
    df = df.reindex(columns=cols)
    df["amount"] = df["amount"].map(lambda a: float(Decimal(a)))
    df["month"] = df["date"].str.slice(0, 7)
    return df


def monthly_trend(expenses: List[Dict[str, Any]], end_month: str, months: int = 6) -> pd.DataFrame:
    """
    Spending per month for the `months` months ending at `end_month`
    (inclusive). Months without expenses appear with total 0.
    Columns: month ("2024-03"), label ("Mar"), total.
    """
    periods = pd.period_range(end=pd.Period(end_month, freq="M"), periods=months, freq="M")
    keys = [str(p) for p in periods]

    df = expenses_frame(expenses)
    totals = df.groupby("month")["amount"].sum() if not df.empty else pd.Series(dtype=float)

    return pd.DataFrame({
        "month": keys,
        "label": [p.strftime("%b") for p in periods],
        "total": [float(totals.get(k, 0.0)) for k in keys],
    })


def category_breakdown(summary: Dict[str, Any]) -> pd.DataFrame:
    totals = summary.get("categoryTotals") or {}
    return pd.DataFrame({
        "category": list(totals.keys()),
        "label": [format_category_name(c) for c in totals],
        "total": [float(v) for v in totals.values()],
        "color": [CATEGORY_COLORS.get(c, CATEGORY_COLORS["other"]) for c in totals],
    })


def budget_vs_actual(
    summary: Dict[str, Any],
    expenses: List[Dict[str, Any]],
    end_month: str,
    months: int = 6,
) -> pd.DataFrame:
    """
    Budget against actual spending for the trailing months. The budget bar
    is the summary month's budget repeated for every month.
    Columns: month, label, budget, actual.
    """
    trend = monthly_trend(expenses, end_month, months)
    return pd.DataFrame({
        "month": trend["month"],
        "label": trend["label"],
        "budget": float(summary["budgetAmount"]),
        "actual": trend["total"],
    })


def _percent(part: float, whole: float) -> int:
    # rounds half-up, same as budgetPercentage
    pct = Decimal(str(part)) * 100 / Decimal(str(whole))
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def overview_stats(summary: Dict[str, Any]) -> List[Dict[str, str]]:
    """The four overview cards shown on top of the dashboard."""
    budget = float(summary["budgetAmount"])
    remaining = float(summary["budgetRemaining"])
    remaining_pct = _percent(remaining, budget) if budget > 0 else 0
    month_name = format_month_display(summary["month"]).split(" ")[0]

    return [
        {"label": "Total Spent", "value": format_money(summary["totalSpent"]),
         "caption": f"{summary['budgetPercentage']}% of budget"},
        {"label": "Budget Remaining", "value": format_money(remaining),
         "caption": f"{remaining_pct}% remaining"},
        {"label": "Monthly Budget", "value": format_money(budget),
         "caption": f"Set for {month_name}"},
        {"label": "Transactions", "value": str(summary["transactionCount"]),
         "caption": "This month"},
    ]
