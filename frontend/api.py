# frontend/api.py
"""HTTP client for the FinFit API, used by the dashboard."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from frontend.config import API_TIMEOUT, API_URL


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class FinanceApiClient:
    """
    Thin wrapper over the REST endpoints. Returns decoded JSON and raises
    ApiError for any non-2xx answer, carrying the server's `message`.

    `client` may be any httpx.Client (the tests pass a FastAPI TestClient).
    """

    def __init__(self, base_url: str = API_URL, client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(base_url=base_url, timeout=API_TIMEOUT)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        r = self._client.request(method, path, **kwargs)
        if r.status_code >= 400:
            try:
                message = r.json().get("message") or r.reason_phrase
            except ValueError:
                message = r.text or r.reason_phrase
            raise ApiError(r.status_code, message)
        if r.status_code == 204 or not r.content:
            return None
        return r.json()

    # -------- Expenses --------
    def list_expenses(
        self,
        category: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = {}
        if category:
            params["category"] = category
        if start_date and end_date:
            params["startDate"] = start_date
            params["endDate"] = end_date
        return self._request("GET", "/api/expenses", params=params)

    def get_expense(self, id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/expenses/{id}")

    def create_expense(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/expenses", json=data)

    def update_expense(self, id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/expenses/{id}", json=data)

    def delete_expense(self, id: int) -> None:
        self._request("DELETE", f"/api/expenses/{id}")

    # -------- Budgets --------
    def list_budgets(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/budgets")

    def get_budget_for_month(self, month: str) -> Optional[Dict[str, Any]]:
        try:
            return self._request("GET", f"/api/budgets/month/{month}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise

    def save_budget(self, amount: str, month: str) -> Dict[str, Any]:
        return self._request("POST", "/api/budgets", json={"amount": amount, "month": month})

    def update_budget(self, id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/budgets/{id}", json=data)

    def delete_budget(self, id: int) -> None:
        self._request("DELETE", f"/api/budgets/{id}")

    # -------- Analytics --------
    def get_summary(self, month: Optional[str] = None) -> Dict[str, Any]:
        params = {"month": month} if month else {}
        return self._request("GET", "/api/analytics/summary", params=params)
