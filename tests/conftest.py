import os
import sys

# Point the app at a throwaway in-memory database before anything imports the config
os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ.setdefault("SESSION_SECRET", "test-secret")

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.db import init_db, close_db
from app.main import app


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database per test."""
    await init_db("sqlite://:memory:")
    yield
    await close_db()


@pytest_asyncio.fixture
async def user(db):
    from app.services import user_service
    return await user_service.create_user({
        "username": "jdoe",
        "password": "not-hashed-here",
        "name": "Jane Doe",
        "email": "jdoe@example.com",
    })


@pytest.fixture
def product_data():
    """Factory for valid product payloads."""
    def make(**overrides):
        data = {
            "name": "Widget A",
            "sku": "WA-001",
            "category": "Widgets",
            "quantity": 100,
            "min_quantity": 10,
            "price": Decimal("10.00"),
            "cost": Decimal("4.00"),
        }
        data.update(overrides)
        return data
    return make


@pytest.fixture
def client():
    # Entering the context runs the lifespan, so every test gets its own database
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_client(client):
    """TestClient holding a logged-in session cookie."""
    client.post("/api/v1/auth/register", json={
        "username": "admin",
        "password": "admin123",
        "name": "Administrator",
        "email": "admin@company.com",
    })
    response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client
