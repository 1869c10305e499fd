import datetime as dt
import re
from decimal import Decimal
from typing import Annotated, ClassVar, Dict, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from backend.core.summary import Summary

# -------- Field validators --------
_AMOUNT_RE = re.compile(r"^\d+(\.\d{1,2})?$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
_MONTH_RE = re.compile(MONTH_PATTERN)

# numeric(10, 2)
_MAX_AMOUNT = Decimal("100000000")


def _valid_amount(v: str) -> str:
    if not _AMOUNT_RE.fullmatch(v):
        raise ValueError("amount must be a non-negative decimal with at most 2 decimal places")
    if Decimal(v) >= _MAX_AMOUNT:
        raise ValueError("amount is too large")
    return v


def _valid_date(v: str) -> str:
    if not _DATE_RE.fullmatch(v):
        raise ValueError("date must be formatted as YYYY-MM-DD")
    try:
        dt.date.fromisoformat(v)
    except ValueError:
        raise ValueError("date is not a valid calendar date")
    return v


def valid_month(v: str) -> str:
    if not _MONTH_RE.fullmatch(v):
        raise ValueError("month must be formatted as YYYY-MM")
    return v


Amount = Annotated[str, AfterValidator(_valid_amount)]
IsoDate = Annotated[str, AfterValidator(_valid_date)]
IsoMonth = Annotated[str, AfterValidator(valid_month)]
Category = Literal[
    "food",
    "transport",
    "entertainment",
    "utilities",
    "shopping",
    "healthcare",
    "other",
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _PartialUpdate(CamelModel):
    """Every field optional, but a field that is sent may not be null unless listed here."""

    _nullable: ClassVar[tuple] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self._nullable:
                raise ValueError(f"{name} may not be null")
        return self


# -------- Expenses --------
class ExpenseCreate(CamelModel):
    description: str = Field(min_length=1)
    amount: Amount
    category: Category
    date: IsoDate
    notes: Optional[str] = None


class ExpenseUpdate(_PartialUpdate):
    _nullable: ClassVar[tuple] = ("notes",)

    description: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[Amount] = None
    category: Optional[Category] = None
    date: Optional[IsoDate] = None
    notes: Optional[str] = None


class ExpenseOut(CamelModel):
    id: int
    description: str
    amount: str
    category: str
    date: str
    notes: Optional[str] = None
    created_at: dt.datetime
    model_config = ConfigDict(from_attributes=True)


# -------- Budgets --------
class BudgetCreate(CamelModel):
    amount: Amount
    month: IsoMonth


class BudgetUpdate(_PartialUpdate):
    amount: Optional[Amount] = None
    month: Optional[IsoMonth] = None


class BudgetOut(CamelModel):
    id: int
    amount: str
    month: str
    created_at: dt.datetime
    model_config = ConfigDict(from_attributes=True)


# -------- Analytics --------
class SummaryOut(CamelModel):
    total_spent: float
    budget_amount: float
    budget_remaining: float
    budget_percentage: int
    transaction_count: int
    category_totals: Dict[str, float]
    month: str

    @classmethod
    def from_summary(cls, s: Summary) -> "SummaryOut":
        return cls(
            total_spent=float(s.total_spent),
            budget_amount=float(s.budget_amount),
            budget_remaining=float(s.budget_remaining),
            budget_percentage=s.budget_percentage,
            transaction_count=s.transaction_count,
            category_totals={k: float(v) for k, v in s.category_totals.items()},
            month=s.month,
        )
