"""ORM models."""

from pagingsample.models.cheese import NAME_MAX_LENGTH, SQL_INT_MAX, Cheese

__all__ = ["Cheese", "NAME_MAX_LENGTH", "SQL_INT_MAX"]
