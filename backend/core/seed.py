# backend/core/seed.py
import json
import logging
import pathlib

from backend.core.store import Storage
from backend.schemas import BudgetCreate, ExpenseCreate

SEED_PATH = pathlib.Path(__file__).resolve().parent.parent / "data" / "seed.json"

log = logging.getLogger("uvicorn.error")


def load_seed(store: Storage, path: pathlib.Path = SEED_PATH) -> int:
    """
    Insert the demo expenses and budgets; returns how many records were read.
    Entries go through the same schemas as the API, so a bad file raises
    pydantic.ValidationError before anything invalid reaches the store.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    expenses = [ExpenseCreate.model_validate(e) for e in data.get("expenses", [])]
    budgets = [BudgetCreate.model_validate(b) for b in data.get("budgets", [])]

    for e in expenses:
        store.create_expense(e.model_dump())
    for b in budgets:
        store.create_budget(b.model_dump())

    count = len(expenses) + len(budgets)
    log.info("Loaded %d demo records from %s", count, path.name)
    return count
