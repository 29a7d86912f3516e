"""Uniform JSON envelopes for success and error responses."""

from __future__ import annotations

from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any

from flask import Response, jsonify


def isoformat_utc(value: datetime | None) -> str | None:
    """Render a timestamp as ISO 8601 in UTC with a ``Z`` suffix.

    SQLite drops timezone information, so naive values are treated as UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp() -> str:
    return isoformat_utc(datetime.now(UTC))


def success_response(
    message: str,
    status: int = HTTPStatus.OK,
    **payload: Any,
) -> tuple[Response, int]:
    body = {"success": True, "message": message}
    body.update(payload)
    body["timestamp"] = utc_timestamp()
    return jsonify(body), status


def error_payload(
    message: str,
    error_code: str | None = None,
    details: Any = None,
    request_id: str | None = None,
) -> dict:
    body: dict[str, Any] = {"success": False, "message": message}
    if error_code:
        body["error_code"] = error_code
    if details is not None:
        body["details"] = details
    body["timestamp"] = utc_timestamp()
    if request_id:
        body["request_id"] = request_id
    return body
