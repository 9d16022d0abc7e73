"""Flask application package for the paged cheese list."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied after the environment config.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from pagingsample.config import get_config
    from pagingsample.db import init_db
    from pagingsample.error_handlers import register_error_handlers
    from pagingsample.extensions import init_services
    from pagingsample.logging_config import configure_logging
    from pagingsample.routes.cheeses import cheeses_bp
    from pagingsample.routes.gestures import gestures_bp
    from pagingsample.routes.health import health_bp
    from pagingsample.routes.web import web_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    init_services(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(cheeses_bp, url_prefix="/api")
    app.register_blueprint(gestures_bp, url_prefix="/api")

    return app
