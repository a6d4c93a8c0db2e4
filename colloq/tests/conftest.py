"""Shared fixtures: an in-memory database per test and an API client on top of it."""

import pytest
from fastapi.testclient import TestClient

from colloq.api.app import create_application
from colloq.config.auth import AuthConfig
from colloq.db import Database, DatabaseConfig


@pytest.fixture
def database():
    database = Database(DatabaseConfig(database_url="sqlite://"))
    database.init_db()
    yield database
    database.dispose()


@pytest.fixture
def auth_config():
    return AuthConfig(secret_key="test-secret", bcrypt_rounds=4)


@pytest.fixture
def client(database, auth_config):
    app = create_application(database=database, auth_config=auth_config)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(client):
    """Sign up and log in a user; return the bearer header."""
    client.post("/api/signup", json={"name": "Asha", "email": "asha@example.com", "password": "secret123"})
    response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "secret123"})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
