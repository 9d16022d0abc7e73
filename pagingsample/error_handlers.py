"""Map route and mutation failures onto the JSON envelope."""

from __future__ import annotations

import logging

from flask import Flask
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from pagingsample.errors import AppError, NotFoundError, as_app_error
from pagingsample.utils.responses import fail

logger = logging.getLogger(__name__)


def _internal_error() -> AppError:
    return AppError(code="internal_error", message="Internal server error", status_code=500)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    @app.errorhandler(SchemaValidationError)
    @app.errorhandler(SQLAlchemyError)
    def _handle_known(exc: Exception):
        if isinstance(exc, SQLAlchemyError):
            # Mutation failures were already logged with a traceback on the I/O thread.
            logger.warning("Database error: %s", exc)
        return fail(as_app_error(exc) or _internal_error())

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = int(exc.code or 500)
        if status == 404:
            return fail(NotFoundError())
        return fail(
            AppError(
                code="http_error",
                message=exc.description or "HTTP error",
                status_code=status,
                details={"name": exc.name},
            )
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail(_internal_error())
