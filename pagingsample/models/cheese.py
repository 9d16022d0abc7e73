"""Cheese ORM model."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pagingsample.models.base import Base

NAME_MAX_LENGTH = 200

# Largest value a SQL INTEGER column (and the sqlite driver) accepts.
SQL_INT_MAX = 2**63 - 1


class Cheese(Base):
    """A named list entry with a manual ordering key.

    ``position`` is not declared unique: a swap rewrites two rows in one
    transaction and would collide on the intermediate state.
    """

    __tablename__ = "cheeses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"Cheese(id={self.id!r}, name={self.name!r}, position={self.position!r})"
