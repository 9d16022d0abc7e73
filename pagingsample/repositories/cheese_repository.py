"""Repository layer for Cheese persistence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from pagingsample.models.cheese import SQL_INT_MAX, Cheese


class CheeseRepository:
    """Queries and mutations for the cheese table.

    Every list-shaped read uses the same order (position, then id) so that a
    zero-based index means the same row to the pager and to ``get_at``.
    """

    @staticmethod
    def _ordered():
        return select(Cheese).order_by(Cheese.position.asc(), Cheese.id.asc())

    def count(self, session: Session) -> int:
        return int(session.scalar(select(func.count()).select_from(Cheese)) or 0)

    def list_page(self, session: Session, offset: int, limit: int) -> Sequence[Cheese]:
        stmt = self._ordered().offset(offset).limit(limit)
        return list(session.scalars(stmt).all())

    def get_by_id(self, session: Session, cheese_id: int) -> Cheese | None:
        if not 0 < cheese_id <= SQL_INT_MAX:
            return None
        return session.get(Cheese, cheese_id)

    def get_at(self, session: Session, index: int) -> Cheese | None:
        """Row at ``index`` of the ordered list, or None when out of range."""

        if not 0 <= index <= SQL_INT_MAX:
            return None
        stmt = self._ordered().offset(index).limit(1)
        return session.scalars(stmt).first()

    def get_highest_position(self, session: Session) -> int:
        highest = session.scalar(select(func.max(Cheese.position)))
        return int(highest) if highest is not None else 0

    def insert(self, session: Session, name: str, position: int) -> Cheese:
        cheese = Cheese(name=name, position=position)
        session.add(cheese)
        session.flush()  # assign PK
        return cheese

    def insert_all(self, session: Session, names: Iterable[str], start_position: int = 1) -> int:
        cheeses = [
            Cheese(name=str(name), position=start_position + offset)
            for offset, name in enumerate(names)
        ]
        session.add_all(cheeses)
        session.flush()
        return len(cheeses)

    def delete(self, session: Session, cheese: Cheese) -> None:
        session.delete(cheese)
        session.flush()

    def update(self, session: Session, *cheeses: Cheese) -> None:
        session.add_all(cheeses)
        session.flush()
