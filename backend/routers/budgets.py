# backend/routers/budgets.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from backend.core.store import DuplicateMonthError, Storage, get_storage
from backend.schemas import MONTH_PATTERN, BudgetCreate, BudgetOut, BudgetUpdate

router = APIRouter(prefix="/api/budgets", tags=["Budgets"])

log = logging.getLogger("uvicorn.error")


@router.get("", response_model=List[BudgetOut])
def list_budgets(store: Storage = Depends(get_storage)):
    """Newest month first."""
    try:
        return store.get_budgets()
    except Exception:
        log.exception("Failed to fetch budgets")
        raise HTTPException(500, "Failed to fetch budgets")


@router.get("/month/{month}", response_model=BudgetOut)
def get_budget_for_month(
    month: str = Path(..., pattern=MONTH_PATTERN),
    store: Storage = Depends(get_storage),
):
    try:
        budget = store.get_budget_by_month(month)
    except Exception:
        log.exception("Failed to fetch budget for %s", month)
        raise HTTPException(500, "Failed to fetch budget")
    if budget is None:
        raise HTTPException(404, "Budget not found for this month")
    return budget


@router.post("", response_model=BudgetOut, status_code=201)
def create_budget(body: BudgetCreate, store: Storage = Depends(get_storage)):
    """Creates the month's budget, or replaces the amount of the one already there."""
    try:
        return store.create_budget(body.model_dump())
    except Exception:
        log.exception("Failed to create budget")
        raise HTTPException(500, "Failed to create budget")


@router.put("/{id}", response_model=BudgetOut)
def update_budget(id: int, body: BudgetUpdate, store: Storage = Depends(get_storage)):
    try:
        budget = store.update_budget(id, body.model_dump(exclude_unset=True))
        if budget is None:
            raise HTTPException(404, "Budget not found")
        return budget
    except DuplicateMonthError as e:
        raise HTTPException(409, f"A budget for {e.month} already exists")
    except HTTPException:
        raise
    except Exception:
        log.exception("Failed to update budget %s", id)
        raise HTTPException(500, "Failed to update budget")


@router.delete("/{id}", status_code=204)
def delete_budget(id: int, store: Storage = Depends(get_storage)):
    try:
        found = store.delete_budget(id)
    except Exception:
        log.exception("Failed to delete budget %s", id)
        raise HTTPException(500, "Failed to delete budget")
    if not found:
        raise HTTPException(404, "Budget not found")
    return Response(status_code=204)
