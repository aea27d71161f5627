"""
Shared pytest fixtures: an in-memory SQLite database per test and a FastAPI
TestClient whose ``get_db`` dependency points at it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from guestlist import models  # noqa: F401
from guestlist.database import Base, get_db
from guestlist.main import app


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def create_guest(client):
    def _create(name, **fields):
        response = client.post("/api/guests", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_function(client):
    def _create(name, **fields):
        response = client.post("/api/functions", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
