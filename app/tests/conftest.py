import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routes.receipts import get_store
from app.services.store import ResultStore

@pytest.fixture
def store():
    return ResultStore()

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
