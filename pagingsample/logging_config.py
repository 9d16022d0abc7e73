"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain stdlib logging from ``LOG_LEVEL``.

    Swap and mutation logs come from ``pagingsample.services.*``.
    """

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(threadName)s %(name)s %(message)s",
    )
    logging.getLogger("pagingsample").setLevel(level)

    # SQL echo is too chatty for list scrolling.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
