"""Authorization decorators for protected routes."""

from __future__ import annotations

from functools import wraps

from flask import current_app
from flask_jwt_extended import current_user, verify_jwt_in_request

from models.user import User
from utils.errors import AuthError


def auth_required(fn):
    """Require a valid bearer token whose subject still exists.

    The resolved account is available as ``flask_jwt_extended.current_user``.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        return current_app.ensure_sync(fn)(*args, **kwargs)

    return wrapper


def require_admin() -> User:
    user = current_user
    if not user.is_admin:
        raise AuthError(
            "Admin privileges required",
            error_code="AUTH_FORBIDDEN",
            status=403,
        )
    return user


def admin_required(fn):
    """Like :func:`auth_required`, then reject accounts without the admin role."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        require_admin()
        return current_app.ensure_sync(fn)(*args, **kwargs)

    return wrapper
