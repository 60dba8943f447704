"""Pooled SQLAlchemy engine for the creator finance store.

Every repository in the project reads and writes through one process-wide
engine. The engine is built on first use from FINANCE_DB_URL.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting from the environment or a local .env file.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the finance engine.

    Dashboard requests run a handful of short queries each, so a pool of five
    connections with five overflow slots is enough. Stale connections are
    replaced through pre-ping.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Return the shared finance engine, creating it on first call."""
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(_get_env_var("FINANCE_DB_URL"))
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared finance engine to repositories through the port."""

    def get_finance_engine(self) -> Engine:
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
