"""Bounded relational connection pool.

Wraps a SQLAlchemy async engine whose queue pool never hands out more than
``max_connections`` connections at once. Borrowers wait up to
``acquire_timeout`` seconds and then fail with ``StoreConnectionError``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from commerce_api.errors import StoreConnectionError, describe

logger = logging.getLogger(__name__)

# Bare dialect names are mapped onto their asyncio drivers
_ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
}


def async_database_url(database_url: str) -> URL:
    """Turn a configured database URL into a driver-qualified SQLAlchemy URL.

    Accepts the short SQLite forms ``sqlite:path.db`` and ``sqlite::memory:``
    as well as regular SQLAlchemy URLs.

    Raises:
        sqlalchemy.exc.ArgumentError: If the URL cannot be parsed
    """
    database_url = database_url.strip()
    if database_url.startswith("sqlite:") and not database_url.startswith("sqlite:/"):
        database_url = "sqlite:///" + database_url[len("sqlite:"):]

    url = make_url(database_url)
    driver = _ASYNC_DRIVERS.get(url.drivername)
    if driver:
        url = url.set(drivername=driver)
    return url


def is_memory_database(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class DatabasePool:
    """Fixed-size pool of relational store connections.

    Example:
        ```python
        pool = DatabasePool.create("sqlite:///app.db", max_connections=2)
        await pool.connect()

        async with pool.acquire() as conn:
            await conn.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, engine: AsyncEngine, max_connections: int) -> None:
        """Initialize the pool.

        Args:
            engine: Async engine configured with a bounded queue pool.
            max_connections: The pool bound the engine was built with.
        """
        self._engine = engine
        self._max_connections = max_connections

    @classmethod
    def create(
        cls,
        database_url: str,
        max_connections: int = 2,
        acquire_timeout: float = 30.0,
    ) -> "DatabasePool":
        """Factory method to build a pool from a connection string.

        No connection is opened here; call ``connect()`` for that.

        Args:
            database_url: Connection string of the relational store.
            max_connections: Upper bound on concurrently borrowed connections.
            acquire_timeout: Seconds a borrower waits for a free connection.

        Returns:
            Configured DatabasePool
        """
        url = async_database_url(database_url)

        if is_memory_database(url) and max_connections > 1:
            # every in-memory SQLite connection is a separate empty database
            logger.warning(
                "In-memory SQLite database, limiting pool to one connection (configured %d)",
                max_connections,
            )
            max_connections = 1

        engine = create_async_engine(
            url,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=max_connections,
            max_overflow=0,
            pool_timeout=acquire_timeout,
            pool_pre_ping=True,
        )
        return cls(engine, max_connections)

    async def connect(self) -> None:
        """Open one connection eagerly to prove the store is reachable.

        Raises:
            StoreConnectionError: If no connection can be established
        """
        async with self.acquire() as conn:
            try:
                await conn.execute(text("SELECT 1"))
            except SQLAlchemyError as e:
                raise StoreConnectionError(describe(e)) from e

        logger.info(
            "Database pool ready (%s, max %d connections)",
            self._engine.url.render_as_string(hide_password=True),
            self._max_connections,
        )

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncConnection]:
        """Borrow a connection; it goes back to the pool when the block exits.

        Raises:
            StoreConnectionError: If the pool is exhausted past the timeout or
                the store cannot be reached
        """
        conn = self._engine.connect()
        try:
            await conn.start()
        except (SQLAlchemyError, OSError) as e:
            raise StoreConnectionError(describe(e)) from e

        try:
            yield conn
        finally:
            await conn.close()

    async def close(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        logger.info("Database pool closed")

    def checked_out(self) -> int:
        """Number of connections currently borrowed."""
        return self._engine.sync_engine.pool.checkedout()

    @property
    def max_connections(self) -> int:
        return self._max_connections

    @property
    def engine(self) -> AsyncEngine:
        """Get the underlying async engine."""
        return self._engine
