"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEFAULT_USER_ROLE = "admin"
    LOG_LEVEL = "WARNING"


USER_PAYLOAD = {
    "email": "Jane.Doe@Example.com",
    "password": "secret123",
    "name": "Jane Doe",
    "age": 30,
    "bio": "Collector of things",
}


@pytest.fixture()
def app(tmp_path) -> Flask:
    """Create a Flask application instance for tests."""

    class TestConfig(_BaseTestConfig):
        STATIC_DIR = str(tmp_path / "public")

    application = create_app(TestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def registered_user(client: FlaskClient) -> dict:
    """Register the default user and return the response body."""

    response = client.post("/api/auth/register", json=USER_PAYLOAD)
    assert response.status_code == 201
    return response.get_json()


@pytest.fixture()
def auth_headers(registered_user: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {registered_user['token']}"}
