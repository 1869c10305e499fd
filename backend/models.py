# backend/models.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

EXPENSE_CATEGORIES = (
    "food",
    "transport",
    "entertainment",
    "utilities",
    "shopping",
    "healthcare",
    "other",
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Expense:
    id: int
    description: str
    amount: str          # decimal as text, e.g. "4.50"
    category: str
    date: str            # YYYY-MM-DD
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=_now)


@dataclass
class Budget:
    id: int
    amount: str
    month: str           # YYYY-MM
    created_at: datetime = field(default_factory=_now)
