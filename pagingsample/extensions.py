"""Per-app wiring for the cheese list services."""

from __future__ import annotations

from flask import Flask, current_app

from pagingsample.executors import IOExecutor
from pagingsample.invalidation import InvalidationTracker
from pagingsample.paging import PagingConfig
from pagingsample.services.cheese_service import CheeseService
from pagingsample.services.gesture_service import GestureService


def init_services(app: Flask) -> None:
    """Create the I/O executor and services. Requires ``init_db`` first."""

    paging = PagingConfig.from_mapping(app.config)
    executor = IOExecutor(thread_name_prefix="cheese-io")
    cheeses = CheeseService(
        session_factory=app.extensions["session_factory"],
        executor=executor,
        tracker=InvalidationTracker(),
        paging=paging,
    )

    app.extensions["io_executor"] = executor
    app.extensions["cheese_service"] = cheeses
    app.extensions["gesture_service"] = GestureService(cheeses)


def get_cheese_service() -> CheeseService:
    return current_app.extensions["cheese_service"]


def get_gesture_service() -> GestureService:
    return current_app.extensions["gesture_service"]


def shutdown_services(app: Flask) -> None:
    executor: IOExecutor | None = app.extensions.pop("io_executor", None)
    if executor is not None:
        executor.shutdown(wait=True)
