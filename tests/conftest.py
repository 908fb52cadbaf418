"""
Test configuration and fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for each test"""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    return url


@pytest.fixture
def client(database_url):
    """Create a test client; the app lifespan opens and closes the database"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    """Session on the same database the app is using"""
    session = app.state.database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
