# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from blush.db import get_session, init_db
from blush.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path):
    # Separate connections per thread, like a real deployment
    engine = create_engine(
        f"sqlite:///{tmp_path / 'blush-test.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def booking():
    return {
        "name": "Ada",
        "email": "ada@example.com",
        "services": ["Facial", "Manicure"],
        "parlour": "Downtown",
        "date": "2099-01-01",
        "time": "10:00",
    }
