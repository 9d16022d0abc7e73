"""Create the cheese table in the configured database and seed it.

Reads DATABASE_URL from .env / environment.

Usage:
  python scripts/create_tables.py [--no-seed]
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from pagingsample.models.base import Base
from pagingsample.config import resolve_database_url
from pagingsample.db import create_app_engine, create_session_factory
from pagingsample.seed import seed_cheeses

# Import models so they register with Base.metadata
from pagingsample import models  # noqa: F401


def main(argv: list[str] | None = None) -> int:
    """Create all ORM tables and fill an empty cheese table."""

    args = sys.argv[1:] if argv is None else argv

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    inserted = 0
    if "--no-seed" not in args:
        inserted = seed_cheeses(create_session_factory(engine))

    print(f"Tables created (or already exist). Seeded {inserted} cheeses.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
