"""Database utilities for task persistence.

Smoke check:
  - Without DATABASE_URL: start the app, POST /api/tasks, then GET /api/tasks/{id}.
    Rows land in ./data/tasks.db and survive a restart.
  - With DATABASE_URL=sqlite://: the same flow works but nothing survives a restart.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskRecord(Base):
    __tablename__ = "tasks"
    # Keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    due_date = Column(DateTime(timezone=True), nullable=True)
    priority = Column(String(20), nullable=False, default="Medium")
    status = Column(String(50), nullable=True, default="Pending")
    is_completed = Column(Boolean, nullable=False, default=False)


class Database:
    """Owns the SQLAlchemy engine and session factory for one database URL."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.url = make_url(database_url)
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if self.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.is_in_memory:
                # One shared connection, otherwise every session sees an empty database.
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and self.url.database in (None, "", ":memory:")

    def session(self) -> Session:
        return self._session_factory()

    def create_all(self) -> None:
        if self.is_sqlite and not self.is_in_memory:
            Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(self.engine)
        logger.info("Database schema ready (backend=%s)", self.url.get_backend_name())

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()
