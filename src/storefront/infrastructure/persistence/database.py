"""Engine and session factories.

SQLite gets two adjustments so concurrent requests cannot both act on
the same stale stock value:

- pysqlite's own transaction handling is switched off and every
  transaction starts with ``BEGIN IMMEDIATE``, taking the write lock up
  front;
- the driver waits up to ``lock_timeout`` seconds for that lock before
  failing with "database is locked".

Other backends rely on the ``SELECT ... FOR UPDATE`` row locks taken by
the repositories.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker


def make_engine(database_url: str, lock_timeout: float = 30.0) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        url,
        connect_args={"timeout": lock_timeout, "check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    # Domain objects are plain dataclasses, nothing to expire.
    return sessionmaker(bind=engine, expire_on_commit=False)
