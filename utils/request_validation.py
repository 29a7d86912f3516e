"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from typing import TypeVar

import pydantic
from flask import Request

from utils.errors import InvalidRequestBody, ValidationError

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def parse_json_request(req: Request, *, allow_empty: bool = False) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise InvalidRequestBody("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise InvalidRequestBody("Request body must be valid JSON.")

    if not isinstance(data, dict):
        raise InvalidRequestBody("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise InvalidRequestBody("Request JSON body must not be empty.")

    return data


def format_errors(exc: pydantic.ValidationError) -> list[dict]:
    """Flatten pydantic errors into ``{field, message, type}`` entries."""

    violations = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error.get("loc", ()))
        violations.append(
            {
                "field": field or None,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type"),
            }
        )
    return violations


def validate_payload(schema: type[SchemaT], payload: dict) -> SchemaT:
    """Validate ``payload`` against ``schema`` and return the typed model.

    Raises :class:`~utils.errors.ValidationError` carrying the field-level
    violations when the payload does not conform.
    """

    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(details=format_errors(exc)) from exc
