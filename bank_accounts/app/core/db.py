from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import get_settings


# Execution options for a read-modify-write transaction. On SQLite the write
# lock is taken at BEGIN; other backends ignore the key and rely on FOR UPDATE.
WRITE_TRANSACTION: dict[str, Any] = {"sqlite_begin": "IMMEDIATE"}


def _serialize_sqlite_writers(engine: Engine) -> None:
    # SQLite has no row locks and ignores FOR UPDATE. Writers open with
    # BEGIN IMMEDIATE so read-modify-write sequences cannot interleave; plain
    # reads stay DEFERRED and, under WAL, do not wait on a writer.
    @event.listens_for(engine, "connect")
    def _configure_pysqlite(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin(conn) -> None:
        mode = conn.get_execution_options().get("sqlite_begin", "DEFERRED")
        conn.exec_driver_sql(f"BEGIN {mode}")


def create_engine_for_url(database_url: str) -> Engine:
    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    if database_url.startswith("sqlite"):
        _serialize_sqlite_writers(engine)
    return engine


settings = get_settings()
engine = create_engine_for_url(settings.database_url)


def init_db() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_engine() -> Engine:
    return engine


def set_engine(new_engine: Engine) -> None:
    global engine
    engine = new_engine
