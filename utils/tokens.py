"""Session token issuance and the JWT verification callbacks."""

from __future__ import annotations

from flask import current_app, g, jsonify, request
from flask_jwt_extended import JWTManager, create_access_token

from models import db
from models.user import User
from utils.responses import error_payload

jwt = JWTManager()


def issue_token(user: User) -> str:
    """Sign a session token for ``user`` carrying its identifier and email."""

    return create_access_token(
        identity=user.uid,
        additional_claims={"email": user.email},
    )


def _auth_failure(message: str, error_code: str, status: int):
    response = jsonify(error_payload(message, error_code, request_id=g.get("request_id")))
    return response, status


@jwt.user_lookup_loader
def _load_user(_jwt_header, jwt_data):
    return db.session.get(User, jwt_data["sub"])


@jwt.unauthorized_loader
def _missing_token(reason: str):
    current_app.logger.debug("Rejected request without token: %s", reason)
    return _auth_failure("Access token required", "AUTH_TOKEN_MISSING", 401)


def _has_credential() -> bool:
    header_name = current_app.config.get("JWT_HEADER_NAME", "Authorization")
    header = request.headers.get(header_name, "")
    return len(header.split()) > 1


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    # "Authorization: Bearer" with nothing after it carries no token at all.
    if not _has_credential():
        return _missing_token(reason)
    current_app.logger.info("Rejected invalid token: %s", reason)
    return _auth_failure("Invalid or expired token", "AUTH_TOKEN_INVALID", 403)


@jwt.expired_token_loader
def _expired_token(_jwt_header, _jwt_data):
    return _auth_failure("Invalid or expired token", "AUTH_TOKEN_INVALID", 403)


@jwt.user_lookup_error_loader
def _unknown_user(_jwt_header, jwt_data):
    current_app.logger.info("Token subject %s no longer exists", jwt_data.get("sub"))
    return _auth_failure("Invalid token - user not found", "AUTH_USER_NOT_FOUND", 401)
