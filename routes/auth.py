"""Authentication blueprint providing register, login and verify endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, request
from flask_jwt_extended import current_user
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from models import db
from models.user import User
from schemas import LoginRequest, RegisterRequest
from utils.auth import auth_required
from utils.errors import ConflictError, InvalidCredentials
from utils.ids import generate_id
from utils.request_validation import parse_json_request, validate_payload
from utils.responses import success_response
from utils.tokens import issue_token

auth_bp = Blueprint("auth", __name__)


def _find_by_email(email: str) -> User | None:
    return User.query.filter(func.lower(User.email) == email).first()


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple:
    """Create an account and return a session token for immediate use."""
    data = validate_payload(RegisterRequest, parse_json_request(request))

    # Case-insensitive unique check; the unique index catches concurrent inserts.
    if _find_by_email(data.email) is not None:
        raise ConflictError()

    user = User(
        uid=generate_id("user"),
        email=data.email,
        name=data.name,
        age=data.age,
        bio=data.bio,
        role=current_app.config.get("DEFAULT_USER_ROLE", "admin"),
    )
    user.set_password(data.password)

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise ConflictError() from exc

    current_app.logger.info("Registered user %s", user.uid)
    return success_response(
        "User created successfully",
        HTTPStatus.CREATED,
        user=user.to_dict(),
        token=issue_token(user),
    )


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate with email and password and return a session token."""
    data = validate_payload(LoginRequest, parse_json_request(request))

    user = _find_by_email(data.email)
    if user is None or not user.check_password(data.password):
        raise InvalidCredentials()

    current_app.logger.info("User %s logged in", user.uid)
    return success_response(
        "Login successful",
        user=user.to_dict(),
        token=issue_token(user),
    )


@auth_bp.route("/verify", methods=["GET"])
@auth_required
def verify() -> tuple:
    """Confirm the bearer token and echo the account it belongs to."""
    return success_response("Token is valid", user=current_user.to_dict())
