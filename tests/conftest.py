from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from pagingsample import create_app
from pagingsample.executors import IOExecutor
from pagingsample.extensions import shutdown_services
from pagingsample.invalidation import InvalidationTracker
from pagingsample.models.base import Base
from pagingsample.models.cheese import Cheese
from pagingsample.paging import PagingConfig
from pagingsample.services.cheese_service import CheeseService


@pytest.fixture()
def session_factory(tmp_path) -> Iterator[sessionmaker[Session]]:
    db_path = tmp_path / "unit-tests.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def executor() -> Iterator[IOExecutor]:
    pool = IOExecutor(thread_name_prefix="test-io")
    try:
        yield pool
    finally:
        pool.shutdown(wait=True)


@pytest.fixture()
def tracker() -> InvalidationTracker:
    return InvalidationTracker()


@pytest.fixture()
def service(
    session_factory: sessionmaker[Session],
    executor: IOExecutor,
    tracker: InvalidationTracker,
) -> CheeseService:
    return CheeseService(
        session_factory=session_factory,
        executor=executor,
        tracker=tracker,
        paging=PagingConfig(page_size=2, max_size=10),
    )


@pytest.fixture()
def make_cheeses(session_factory: sessionmaker[Session]) -> Callable[..., list[Cheese]]:
    def _make_cheeses(*names: str, positions: list[int] | None = None) -> list[Cheese]:
        slots = positions or list(range(1, len(names) + 1))
        cheeses = [Cheese(name=name, position=pos) for name, pos in zip(names, slots)]
        with session_factory() as session:
            session.add_all(cheeses)
            session.commit()
        return cheeses

    return _make_cheeses


@pytest.fixture()
def snapshot(session_factory: sessionmaker[Session]) -> Callable[[], list[tuple[str, int]]]:
    """(name, position) for every row, in list order."""

    def _snapshot() -> list[tuple[str, int]]:
        with session_factory() as session:
            stmt = select(Cheese).order_by(Cheese.position.asc(), Cheese.id.asc())
            return [(c.name, c.position) for c in session.scalars(stmt)]

    return _snapshot


@pytest.fixture()
def app(tmp_path) -> Iterator[Flask]:
    flask_app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'app-tests.db'}",
            "SEED_DATABASE": False,
            "PAGE_SIZE": 2,
            "MAX_SIZE": 10,
            "LOG_LEVEL": "WARNING",
        }
    )
    try:
        yield flask_app
    finally:
        shutdown_services(flask_app)
        flask_app.extensions["engine"].dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
