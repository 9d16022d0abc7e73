"""Errors the cheese API turns into JSON failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError


@dataclass
class AppError(Exception):
    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """No cheese with that id, or no row at that list index."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Rejected payload, query string or cheese name."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class StorageError(AppError):
    """The database refused a read or a queued mutation (locked, gone, rejected)."""

    def __init__(self, message: str = "Cheese storage unavailable", details: Any | None = None) -> None:
        super().__init__(code="storage_error", message=message, status_code=503, details=details)


def as_app_error(exc: BaseException) -> AppError | None:
    """Translate library exceptions that have a meaningful client response.

    Mutation failures arrive here unchanged: ``Future.result()`` re-raises
    whatever the I/O thread raised.
    """

    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, SchemaValidationError):
        return ValidationError(details=exc.messages)
    if isinstance(exc, SQLAlchemyError):
        return StorageError(details={"error": type(exc).__name__})
    return None
