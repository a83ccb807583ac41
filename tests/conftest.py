import itertools

import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from infrastructure.database import Database
from interfaces.api import get_use_cases
from main import app


@pytest.fixture
def db():
    # Fixed clock so ids are predictable: 1700000000000, 1700000000001, ...
    ticks = itertools.count()
    return Database(clock=lambda: 1_700_000_000 + next(ticks) / 1000)


@pytest.fixture
def use_cases(db):
    return TaskUseCases(db)


@pytest.fixture
def client(use_cases):
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_task():
    return {"title": "A", "description": "B"}
