"""SQLAlchemy engine and transaction management."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from dongle_registry.core.config import DatabaseSettings
from dongle_registry.domain.bindings.exceptions import BindingConflictError, StorageError

logger = logging.getLogger(__name__)

# Connection execution option selecting the SQLite BEGIN flavour.
BEGIN_MODE_OPTION = "sqlite_begin_mode"


def _enable_sqlite_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first DML statement and never wraps DDL.
    # Writers use BEGIN IMMEDIATE to take the write lock up front, so competing
    # writers wait on the busy timeout rather than failing while promoting a
    # read lock. Read-only scopes ask for DEFERRED and never block on writers.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(connection: Any) -> None:
        mode = connection.get_execution_options().get(BEGIN_MODE_OPTION, "IMMEDIATE")
        connection.exec_driver_sql(f"BEGIN {mode}")


def _build_engine(settings: DatabaseSettings, echo: bool) -> Engine:
    url = make_url(settings.url)
    engine_kwargs: dict[str, Any] = {
        "echo": echo,
        "future": True,
    }
    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite:
        engine_kwargs["connect_args"] = {
            "timeout": settings.busy_timeout,
            "check_same_thread": False,
        }
        if url.database in (None, "", ":memory:"):
            # Every new connection would open a fresh empty database, so keep
            # exactly one and let callers queue for it like for a lock.
            engine_kwargs["poolclass"] = QueuePool
            engine_kwargs["pool_size"] = 1
            engine_kwargs["max_overflow"] = 0
            engine_kwargs["pool_timeout"] = settings.busy_timeout

    engine = create_engine(url, **engine_kwargs)
    if is_sqlite:
        _enable_sqlite_transactions(engine)
    return engine


class Database:
    """Store handle opened once and shared by every registry component."""

    def __init__(self, settings: DatabaseSettings, *, echo: bool | None = None) -> None:
        self._engine = _build_engine(settings, settings.echo if echo is None else echo)
        self._session_factory = sessionmaker(
            bind=self._engine,
            class_=Session,
            expire_on_commit=False,
        )
        logger.debug("Opened binding store at %s", self._engine.url.render_as_string(hide_password=True))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session_scope(self, *, read_only: bool = False) -> Iterator[Session]:
        """Run the enclosed block as one transaction.

        Commits on success and rolls back on any error.  Driver errors are
        translated: unique violations become :class:`BindingConflictError`,
        everything else from SQLAlchemy becomes :class:`StorageError`.
        ``read_only`` scopes open a deferred transaction that does not wait
        for concurrent writers.
        """
        with self._session_factory() as session:
            try:
                if read_only:
                    session.connection(execution_options={BEGIN_MODE_OPTION: "DEFERRED"})
                yield session
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise BindingConflictError(str(exc.orig)) from exc
            except SQLAlchemyError as exc:
                session.rollback()
                raise StorageError(str(exc)) from exc
            except Exception:
                session.rollback()
                raise

    def dispose(self) -> None:
        self._engine.dispose()
