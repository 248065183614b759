"""Shared fixtures: every test gets an application backed by its own database file."""

import pytest
from fastapi.testclient import TestClient

from subway_api.app.core.config import Settings
from subway_api.app.core.db import Database
from subway_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=str(tmp_path / "subway.db"))


@pytest.fixture
def client(settings):
    app = create_app(settings)
    # Entering the client runs the lifespan, which applies migrations.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(settings):
    database = Database(settings.database_url)
    database.init()
    return database
