# backend/routers/analytics.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.core.store import Storage, get_storage
from backend.core.summary import build_summary
from backend.schemas import MONTH_PATTERN, SummaryOut

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])

log = logging.getLogger("uvicorn.error")


@router.get("/summary", response_model=SummaryOut)
def summary(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN),
    store: Storage = Depends(get_storage),
):
    """
    GET /api/analytics/summary?month=2024-03
    Without month, the current (UTC) month is used.
    """
    try:
        return SummaryOut.from_summary(build_summary(store, month))
    except Exception:
        log.exception("Failed to build summary for %s", month)
        raise HTTPException(500, "Failed to fetch analytics summary")
