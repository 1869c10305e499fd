# backend/core/summary.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from backend.core.store import Storage


@dataclass
class Summary:
    month: str
    total_spent: Decimal
    budget_amount: Decimal
    budget_remaining: Decimal
    budget_percentage: int
    transaction_count: int
    category_totals: Dict[str, Decimal] = field(default_factory=dict)


def current_month() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m")


def month_bounds(month: str):
    """
    Return (first, last) date strings for a YYYY-MM month.

    The upper bound is always day 31. It is only compared as a string
    against real ISO dates, so it still covers every day of short months
    and never reaches into the next one.
    """
    return f"{month}-01", f"{month}-31"


def _pct(spent: Decimal, budget: Decimal) -> int:
    if budget <= 0:
        return 0
    return int((spent * 100 / budget).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_summary(store: Storage, month: Optional[str] = None) -> Summary:
    target = month or current_month()
    start, end = month_bounds(target)

    expenses = store.get_expenses_by_date_range(start, end)
    budget = store.get_budget_by_month(target)

    total_spent = sum((Decimal(e.amount) for e in expenses), Decimal("0"))
    budget_amount = Decimal(budget.amount) if budget else Decimal("0")

    category_totals: Dict[str, Decimal] = {}
    for e in expenses:
        category_totals[e.category] = category_totals.get(e.category, Decimal("0")) + Decimal(e.amount)

    return Summary(
        month=target,
        total_spent=total_spent,
        budget_amount=budget_amount,
        budget_remaining=budget_amount - total_spent,
        budget_percentage=_pct(total_spent, budget_amount),
        transaction_count=len(expenses),
        category_totals=category_totals,
    )
