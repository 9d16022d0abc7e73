"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from pagingsample.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness check; does not touch the database."""

    return ok({"status": "ok"})
