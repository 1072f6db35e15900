"""Pytest configuration and fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_order_repository
from api.main import app
from core.infrastructure.adapters.persistence import InMemoryOrderRepository


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def test_client(repository) -> TestClient:
    """Create FastAPI test client backed by an in-memory repository."""
    app.dependency_overrides[get_order_repository] = lambda: repository

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def order_payload() -> dict:
    return {
        "order_id": 1,
        "customer_id": "11111111-1111-1111-1111-111111111111",
        "line_items": [
            {
                "item_id": "22222222-2222-2222-2222-222222222222",
                "quantity": 2,
                "price": 500,
            }
        ],
        "created_at": "2024-03-01T12:30:00Z",
        "shipped_at": None,
        "completed_at": None,
    }
