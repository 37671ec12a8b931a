"""
PostgreSQL connection pool shared by every request.

One Database instance is created per process and kept on ``app.state``.
The pool itself is opened lazily: if PostgreSQL is unreachable at startup the
failure is logged and the next request retries the connection.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import extras, pool

from .config import Settings

logger = logging.getLogger(__name__)


class DatabaseUnavailable(Exception):
    """Raised when no connection pool could be opened."""


class Database:
    def __init__(self, settings: Settings):
        self.settings = settings
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        self._lock = threading.Lock()
        # psycopg2 raises PoolError when exhausted; make callers wait instead
        self._slots = threading.BoundedSemaphore(settings.db_pool_max)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Create the connection pool if it does not exist yet.

        Raises:
            DatabaseUnavailable: If PostgreSQL cannot be reached.
        """
        with self._lock:
            if self._pool is not None:
                return
            try:
                self._pool = pool.ThreadedConnectionPool(
                    self.settings.db_pool_min,
                    self.settings.db_pool_max,
                    **self.settings.connection_kwargs(),
                )
            except psycopg2.Error as exc:
                raise DatabaseUnavailable(str(exc)) from exc
        logger.info(
            "Connected to PostgreSQL database %s at %s:%s",
            self.settings.db_name, self.settings.db_host, self.settings.db_port,
        )

    def try_open(self) -> bool:
        """Open the pool, logging instead of raising on failure."""
        try:
            self.open()
        except DatabaseUnavailable as exc:
            logger.error("Database connection failed: %s", exc)
            return False
        return True

    def close(self) -> None:
        with self._lock:
            if self._pool is None:
                return
            self._pool.closeall()
            self._pool = None
        logger.info("Database connection pool closed.")

    @contextmanager
    def cursor(self) -> Iterator[extras.RealDictCursor]:
        """
        Check a connection out of the pool and yield a dict cursor on it.

        The statement runs in the connection's implicit transaction, which is
        committed when the block exits cleanly and rolled back otherwise.
        """
        if self._pool is None:
            self.open()
        pg_pool = self._pool
        with self._slots:
            conn = pg_pool.getconn()
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    yield cur
                conn.commit()
            except Exception:
                if not conn.closed:
                    conn.rollback()
                raise
            finally:
                # broken connections are discarded rather than reused
                pg_pool.putconn(conn, close=bool(conn.closed))
