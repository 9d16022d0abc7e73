"""The ``{success, data, error}`` envelope shared by all API routes."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from pagingsample.errors import AppError


def _envelope(data: Any, error: dict[str, Any] | None) -> Response:
    return jsonify({"success": error is None, "data": data, "error": error})


def ok(data: Any, status_code: int = 200) -> tuple[Response, int]:
    return _envelope(data, None), status_code


def fail(error: AppError) -> tuple[Response, int]:
    body = {"code": error.code, "message": error.message, "details": error.details}
    return _envelope(None, body), error.status_code
