"""Tests for the bearer-token authorization pipeline."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt as pyjwt
import pytest
from flask_jwt_extended import create_access_token

from models import db
from models.user import User
from tests.conftest import USER_PAYLOAD

PROTECTED_ROUTES = [
    ("get", "/api/auth/verify"),
    ("get", "/api/users"),
    ("get", "/api/users/user_1"),
    ("post", "/api/products"),
    ("put", "/api/products/prod_1"),
    ("delete", "/api/products/prod_1"),
]


def _call(client, method: str, path: str, headers=None):
    kwargs = {"headers": headers or {}}
    if method in {"post", "put"}:
        kwargs["json"] = {"title": "Lamp", "price": 10, "in_stock": True}
    return getattr(client, method)(path, **kwargs)


@pytest.mark.parametrize("method, path", PROTECTED_ROUTES)
def test_missing_token_is_rejected(client, method, path):
    response = _call(client, method, path)

    assert response.status_code == 401
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error_code"] == "AUTH_TOKEN_MISSING"
    assert payload["timestamp"]


def test_non_bearer_header_counts_as_missing(client, registered_user):
    response = client.get(
        "/api/auth/verify", headers={"Authorization": registered_user["token"]}
    )

    assert response.status_code == 401
    assert response.get_json()["error_code"] == "AUTH_TOKEN_MISSING"


@pytest.mark.parametrize("method, path", PROTECTED_ROUTES)
def test_expired_token_is_rejected(app, client, registered_user, method, path):
    with app.app_context():
        token = create_access_token(
            identity=registered_user["user"]["uid"],
            expires_delta=timedelta(seconds=-1),
        )

    response = _call(client, method, path, {"Authorization": f"Bearer {token}"})

    assert response.status_code == 403
    assert response.get_json()["error_code"] == "AUTH_TOKEN_INVALID"


@pytest.mark.parametrize("method, path", PROTECTED_ROUTES)
def test_tampered_token_is_rejected(client, registered_user, method, path):
    now = datetime.now(UTC)
    forged = pyjwt.encode(
        {
            "sub": registered_user["user"]["uid"],
            "email": registered_user["user"]["email"],
            "type": "access",
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(days=1),
        },
        "some-other-secret-that-is-long-enough-for-hs256",
        algorithm="HS256",
    )

    response = _call(client, method, path, {"Authorization": f"Bearer {forged}"})

    assert response.status_code == 403
    assert response.get_json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_malformed_token_is_rejected(client):
    response = client.get(
        "/api/auth/verify", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 403
    assert response.get_json()["error_code"] == "AUTH_TOKEN_INVALID"


def test_token_for_unknown_user_is_rejected(app, client):
    with app.app_context():
        token = create_access_token(identity="user_0_missing")

    response = client.get(
        "/api/auth/verify", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.get_json()["error_code"] == "AUTH_USER_NOT_FOUND"


def test_token_encodes_identifier_and_email(app, registered_user):
    with app.app_context():
        claims = pyjwt.decode(
            registered_user["token"],
            app.config["JWT_SECRET_KEY"],
            algorithms=["HS256"],
        )

    assert claims["sub"] == registered_user["user"]["uid"]
    assert claims["email"] == registered_user["user"]["email"]
    lifetime = claims["exp"] - claims["iat"]
    assert lifetime == int(timedelta(days=7).total_seconds())


def test_non_admin_role_cannot_write_products(app, client):
    app.config["DEFAULT_USER_ROLE"] = "member"
    registered = client.post("/api/auth/register", json=USER_PAYLOAD).get_json()
    headers = {"Authorization": f"Bearer {registered['token']}"}

    create = client.post(
        "/api/products",
        json={"title": "Lamp", "price": 10, "in_stock": True},
        headers=headers,
    )
    assert create.status_code == 403
    assert create.get_json()["error_code"] == "AUTH_FORBIDDEN"

    # Read access only needs a valid token.
    assert client.get("/api/users", headers=headers).status_code == 200

    with app.app_context():
        user = db.session.get(User, registered["user"]["uid"])
        assert user.role == "member"
        assert user.is_admin is False


@pytest.mark.parametrize("header", ["Bearer ", "Bearer"])
def test_bearer_without_credential_counts_as_missing(client, header):
    response = client.get("/api/auth/verify", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.get_json()["error_code"] == "AUTH_TOKEN_MISSING"
