"""HTTP error taxonomy rendered through the JSON error envelope."""

from __future__ import annotations

from typing import Any

from werkzeug.exceptions import HTTPException


class ApiError(HTTPException):
    """Base class for errors that carry a machine-readable code."""

    code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    description = "Internal server error"

    def __init__(
        self,
        description: str | None = None,
        *,
        error_code: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(description)
        if error_code:
            self.error_code = error_code
        self.details = details


class ValidationError(ApiError):
    code = 400
    error_code = "VALIDATION_ERROR"
    description = "Invalid input data"


class InvalidRequestBody(ApiError):
    code = 400
    error_code = "INVALID_REQUEST_BODY"
    description = "Request body must be a JSON object."


class ConflictError(ApiError):
    # Duplicate accounts are reported as a plain 400.
    code = 400
    error_code = "USER_ALREADY_EXISTS"
    description = "User with this email already exists"


class InvalidCredentials(ApiError):
    code = 400
    error_code = "INVALID_CREDENTIALS"
    description = "Invalid email or password"


class AuthError(ApiError):
    code = 401
    error_code = "AUTH_TOKEN_MISSING"
    description = "Access token required"

    def __init__(self, description=None, *, status: int | None = None, **kwargs):
        super().__init__(description, **kwargs)
        if status is not None:
            self.code = status


class NotFoundError(ApiError):
    code = 404
    error_code = "NOT_FOUND"
    description = "Resource not found"


def error_code_for(error: HTTPException) -> str:
    """Return the envelope code for any werkzeug HTTP error."""

    explicit = getattr(error, "error_code", None)
    if explicit:
        return explicit
    name = getattr(error, "name", None) or "Error"
    return "_".join(name.upper().replace("'", "").split())
