import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8")
os.environ.setdefault("ARGON2_PARALLELISM", "1")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from scoreboard.app import app
from scoreboard.core import engine
from scoreboard.services.storage import Store


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop them afterwards."""
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return Store(session)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user through the API and return its JSON representation."""

    def _register(name="alice", email="alice@example.com", password="Password123", control=1):
        response = client.post(
            "/users/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "birthDate": "2000-05-17",
                "controlId": control,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["user"]

    return _register
