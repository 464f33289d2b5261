"""Database engine, session and unit-of-work configuration."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import Settings
from .errors import StoreUnavailable

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one process."""

    def __init__(self, url: str, *, echo: bool = False, lock_timeout_ms: int | None = None) -> None:
        engine_kwargs: dict[str, Any] = {"echo": echo, "future": True, "pool_pre_ping": True}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        elif lock_timeout_ms is not None and url.startswith("postgresql"):
            engine_kwargs["connect_args"] = {"options": f"-c lock_timeout={lock_timeout_ms}"}

        self.engine: Engine = create_engine(url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            _serialize_sqlite_writes(self.engine)

        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, future=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.database_echo,
            lock_timeout_ms=settings.lock_timeout_ms,
        )

    def create_all(self) -> None:
        # Import models so every table is registered on the metadata.
        from .. import models  # noqa: F401

        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back otherwise."""

        session = self.session_factory()
        try:
            yield session
            session.commit()
        except (OperationalError, InterfaceError) as exc:
            session.rollback()
            raise StoreUnavailable("Credit store is unavailable.") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def _serialize_sqlite_writes(engine: Engine) -> None:
    # SQLite has no row locks; take the write lock when the transaction starts.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when the integrity error comes from a unique constraint."""

    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate is not None:
        return sqlstate == "23505"
    return "UNIQUE constraint failed" in str(orig)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session for request lifetime."""

    database: Database = request.app.state.database
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()
