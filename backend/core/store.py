# backend/core/store.py
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from backend.models import Budget, Expense

R = TypeVar("R", Expense, Budget)


class DuplicateMonthError(ValueError):
    """Raised when an update would leave two budgets on the same month."""

    def __init__(self, month: str):
        super().__init__(f"A budget already exists for {month}")
        self.month = month


class Storage(ABC):
    """Operations the routers and the summary need from a record store."""

    # -------- Expenses --------
    @abstractmethod
    def get_expenses(self) -> List[Expense]: ...

    @abstractmethod
    def get_expense(self, id: int) -> Optional[Expense]: ...

    @abstractmethod
    def create_expense(self, data: Dict[str, Any]) -> Expense: ...

    @abstractmethod
    def update_expense(self, id: int, data: Dict[str, Any]) -> Optional[Expense]: ...

    @abstractmethod
    def delete_expense(self, id: int) -> bool: ...

    @abstractmethod
    def get_expenses_by_date_range(self, start_date: str, end_date: str) -> List[Expense]: ...

    @abstractmethod
    def get_expenses_by_category(self, category: str) -> List[Expense]: ...

    # -------- Budgets --------
    @abstractmethod
    def get_budgets(self) -> List[Budget]: ...

    @abstractmethod
    def get_budget(self, id: int) -> Optional[Budget]: ...

    @abstractmethod
    def get_budget_by_month(self, month: str) -> Optional[Budget]: ...

    @abstractmethod
    def create_budget(self, data: Dict[str, Any]) -> Budget: ...

    @abstractmethod
    def update_budget(self, id: int, data: Dict[str, Any]) -> Optional[Budget]: ...

    @abstractmethod
    def delete_budget(self, id: int) -> bool: ...


class _Table(Generic[R]):
    """Integer-keyed collection with a sequential id counter."""

    def __init__(self, factory: Callable[..., R], sort_key: Callable[[R], str]):
        self._factory = factory
        self._sort_key = sort_key
        self._rows: Dict[int, R] = {}
        self._next_id = 1

    def list(self) -> List[R]:
        # sorted() is stable with reverse=True, so equal keys keep insertion order
        return sorted(self._rows.values(), key=self._sort_key, reverse=True)

    def get(self, id: int) -> Optional[R]:
        return self._rows.get(id)

    def create(self, data: Dict[str, Any]) -> R:
        id = self._next_id
        self._next_id += 1
        row = self._factory(id=id, created_at=datetime.now(timezone.utc), **data)
        self._rows[id] = row
        return row

    def update(self, id: int, data: Dict[str, Any]) -> Optional[R]:
        existing = self._rows.get(id)
        if existing is None:
            return None
        changes = {k: v for k, v in data.items() if k not in ("id", "created_at")}
        updated = replace(existing, **changes)
        self._rows[id] = updated
        return updated

    def delete(self, id: int) -> bool:
        return self._rows.pop(id, None) is not None

    def clear(self) -> None:
        self._rows.clear()
        self._next_id = 1


class MemStorage(Storage):
    """
    In-memory store. Nothing is persisted: a restart starts from empty
    collections and id 1. FastAPI runs sync handlers in a threadpool, so
    every operation holds one re-entrant lock; concurrent updates to the
    same id still resolve as last-write-wins.
    """

    def __init__(self):
        self._expenses: _Table[Expense] = _Table(Expense, lambda e: e.date)
        self._budgets: _Table[Budget] = _Table(Budget, lambda b: b.month)
        self._lock = threading.RLock()

    def reset(self) -> None:
        with self._lock:
            self._expenses.clear()
            self._budgets.clear()

    # -------- Expenses --------
    def get_expenses(self) -> List[Expense]:
        with self._lock:
            return self._expenses.list()

    def get_expense(self, id: int) -> Optional[Expense]:
        with self._lock:
            return self._expenses.get(id)

    def create_expense(self, data: Dict[str, Any]) -> Expense:
        data = dict(data)
        data["notes"] = data.get("notes") or None
        with self._lock:
            return self._expenses.create(data)

    def update_expense(self, id: int, data: Dict[str, Any]) -> Optional[Expense]:
        with self._lock:
            return self._expenses.update(id, data)

    def delete_expense(self, id: int) -> bool:
        with self._lock:
            return self._expenses.delete(id)

    def get_expenses_by_date_range(self, start_date: str, end_date: str) -> List[Expense]:
        # ISO dates compare lexicographically in chronological order
        return [e for e in self.get_expenses() if start_date <= e.date <= end_date]

    def get_expenses_by_category(self, category: str) -> List[Expense]:
        return [e for e in self.get_expenses() if e.category == category]

    # -------- Budgets --------
    def get_budgets(self) -> List[Budget]:
        with self._lock:
            return self._budgets.list()

    def get_budget(self, id: int) -> Optional[Budget]:
        with self._lock:
            return self._budgets.get(id)

    def get_budget_by_month(self, month: str) -> Optional[Budget]:
        return next((b for b in self.get_budgets() if b.month == month), None)

    def create_budget(self, data: Dict[str, Any]) -> Budget:
        # lookup and insert under one lock, or two requests could both insert the month
        with self._lock:
            existing = self.get_budget_by_month(data["month"])
            if existing is not None:
                return self._budgets.update(existing.id, data)
            return self._budgets.create(data)

    def update_budget(self, id: int, data: Dict[str, Any]) -> Optional[Budget]:
        with self._lock:
            month = data.get("month")
            if month is not None:
                holder = self.get_budget_by_month(month)
                if holder is not None and holder.id != id and self._budgets.get(id) is not None:
                    raise DuplicateMonthError(month)
            return self._budgets.update(id, data)

    def delete_budget(self, id: int) -> bool:
        with self._lock:
            return self._budgets.delete(id)


storage = MemStorage()


def get_storage() -> Storage:
    """FastAPI dependency; tests swap it through app.dependency_overrides."""
    return storage
