"""Service layer for the paged cheese list.

Reads run on the caller's thread with the caller's session. Mutations are
queued on the I/O executor and each runs in its own transaction; callers get
a ``Future`` back.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Callable, TypeVar

from sqlalchemy.orm import Session, sessionmaker

from pagingsample.db import session_scope
from pagingsample.errors import NotFoundError
from pagingsample.executors import IOExecutor
from pagingsample.invalidation import InvalidationTracker
from pagingsample.models.cheese import Cheese
from pagingsample.paging import Page, PagingConfig, build_page
from pagingsample.repositories.cheese_repository import CheeseRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CheeseService:
    """Cheese list use-cases."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        executor: IOExecutor,
        tracker: InvalidationTracker | None = None,
        paging: PagingConfig | None = None,
        repository: CheeseRepository | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._executor = executor
        self._tracker = tracker or InvalidationTracker()
        self._paging = paging or PagingConfig()
        self._repo = repository or CheeseRepository()

    @property
    def tracker(self) -> InvalidationTracker:
        return self._tracker

    @property
    def paging(self) -> PagingConfig:
        return self._paging

    def load_page(self, session: Session, offset: int = 0, limit: int | None = None) -> Page:
        generation = self._tracker.generation
        size = self._paging.resolve_limit(offset, limit)
        total = self._repo.count(session)
        items = self._repo.list_page(session, offset, size) if offset < total else []
        logger.debug("Submit page offset=%d size=%d total=%d", offset, len(items), total)
        return build_page(items, offset, total, self._paging, generation=generation)

    def get_cheese(self, session: Session, cheese_id: int) -> Cheese:
        cheese = self._repo.get_by_id(session, cheese_id)
        if cheese is None:
            raise NotFoundError(message=f"Cheese {cheese_id} not found")
        return cheese

    def insert(self, text: object) -> Future[Cheese]:
        return self._submit(self._insert, str(text))

    def remove(self, cheese_id: int) -> Future[bool]:
        return self._submit(self._remove, int(cheese_id))

    def swap(self, index1: int, index2: int) -> Future[bool]:
        return self._submit(self._swap, int(index1), int(index2))

    def _submit(self, work: Callable[..., T], *args: object) -> Future[T]:
        def _run() -> T:
            try:
                with session_scope(self._session_factory) as session:
                    result = work(session, *args)
            except Exception:
                logger.exception("Cheese mutation %s failed", getattr(work, "__name__", work))
                raise
            if result is not False:
                self._tracker.notify()
            return result

        return self._executor.submit(_run)

    def _insert(self, session: Session, name: str) -> Cheese:
        highest = self._repo.get_highest_position(session)
        return self._repo.insert(session, name=name, position=highest + 1)

    def _remove(self, session: Session, cheese_id: int) -> bool:
        cheese = self._repo.get_by_id(session, cheese_id)
        if cheese is None:
            return False
        self._repo.delete(session, cheese)
        return True

    def _swap(self, session: Session, index1: int, index2: int) -> bool:
        cheese1 = self._repo.get_at(session, index1)
        cheese2 = self._repo.get_at(session, index2)
        if cheese1 is None or cheese2 is None:
            return False

        logger.info(
            "Swapping %s:%s with %s:%s",
            cheese1.name, cheese1.position, cheese2.name, cheese2.position,
        )
        cheese1.position, cheese2.position = cheese2.position, cheese1.position
        logger.info(
            "Swapped %s:%s with %s:%s",
            cheese1.name, cheese1.position, cheese2.name, cheese2.position,
        )
        self._repo.update(session, cheese1, cheese2)
        return True
