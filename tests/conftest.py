"""Shared test setup: temp data directory, fresh tables per test."""

import os
import tempfile

# Setup environment for testing (before the app is imported)
os.environ["RSVP_DATA_DIR"] = tempfile.mkdtemp()
os.environ["RSVP_DB_PATH"] = os.path.join(os.environ["RSVP_DATA_DIR"], "test.db")
os.environ["RSVP_ADMIN_PASSPHRASE"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from rsvp_server.config import settings
from rsvp_server.database import engine
from rsvp_server.main import app


@pytest.fixture(autouse=True)
def fresh_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_passphrase(monkeypatch):
    monkeypatch.setattr(settings, "admin_passphrase", "open-sesame")
    return "open-sesame"
