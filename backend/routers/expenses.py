# backend/routers/expenses.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from backend.core.store import Storage, get_storage
from backend.schemas import ExpenseCreate, ExpenseOut, ExpenseUpdate

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])

log = logging.getLogger("uvicorn.error")


@router.get("", response_model=List[ExpenseOut])
def list_expenses(
    category: Optional[str] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    store: Storage = Depends(get_storage),
):
    """
    GET /api/expenses?category=food
    GET /api/expenses?startDate=2024-03-01&endDate=2024-03-31
    category wins when both filters are given; a range needs both ends.
    """
    try:
        if category:
            return store.get_expenses_by_category(category)
        if start_date and end_date:
            return store.get_expenses_by_date_range(start_date, end_date)
        return store.get_expenses()
    except Exception:
        log.exception("Failed to fetch expenses")
        raise HTTPException(500, "Failed to fetch expenses")


@router.get("/{id}", response_model=ExpenseOut)
def get_expense(id: int, store: Storage = Depends(get_storage)):
    try:
        expense = store.get_expense(id)
    except Exception:
        log.exception("Failed to fetch expense %s", id)
        raise HTTPException(500, "Failed to fetch expense")
    if expense is None:
        raise HTTPException(404, "Expense not found")
    return expense


@router.post("", response_model=ExpenseOut, status_code=201)
def create_expense(body: ExpenseCreate, store: Storage = Depends(get_storage)):
    try:
        return store.create_expense(body.model_dump())
    except Exception:
        log.exception("Failed to create expense")
        raise HTTPException(500, "Failed to create expense")


@router.put("/{id}", response_model=ExpenseOut)
def update_expense(id: int, body: ExpenseUpdate, store: Storage = Depends(get_storage)):
    try:
        expense = store.update_expense(id, body.model_dump(exclude_unset=True))
        if expense is None:
            raise HTTPException(404, "Expense not found")
        return expense
    except HTTPException:
        raise
    except Exception:
        log.exception("Failed to update expense %s", id)
        raise HTTPException(500, "Failed to update expense")


@router.delete("/{id}", status_code=204)
def delete_expense(id: int, store: Storage = Depends(get_storage)):
    try:
        found = store.delete_expense(id)
    except Exception:
        log.exception("Failed to delete expense %s", id)
        raise HTTPException(500, "Failed to delete expense")
    if not found:
        raise HTTPException(404, "Expense not found")
    return Response(status_code=204)
