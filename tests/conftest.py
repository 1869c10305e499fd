import pytest
from fastapi.testclient import TestClient

from backend.app import app
from backend.core.store import MemStorage, get_storage


@pytest.fixture
def store():
    return MemStorage()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_storage] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_expense(**kwargs):
    base = dict(
        description="Coffee",
        amount="4.50",
        category="food",
        date="2024-03-05",
        notes=None,
    )
    base.update(kwargs)
    return base


@pytest.fixture
def expense_data():
    return make_expense
