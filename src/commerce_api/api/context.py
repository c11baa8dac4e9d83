"""Per-process shared context.

Built once at startup and handed, read-only, to every request.
"""

import logging
from dataclasses import dataclass

from commerce_api.config import Settings
from commerce_api.repositories import CachePool, DatabasePool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContext:
    """Store handles shared by every handler.

    Attributes:
        database: Bounded relational connection pool
        cache: Cache store client pool (initialized, not used by handlers)
    """

    database: DatabasePool
    cache: CachePool

    async def close(self) -> None:
        """Tear down both pools."""
        try:
            await self.cache.close()
        finally:
            await self.database.close()


async def build_context(settings: Settings) -> AppContext:
    """Create and verify both pools.

    Any failure here is fatal to startup; the service must not accept
    traffic without a working pool.

    Args:
        settings: Application settings

    Returns:
        The initialized AppContext
    """
    database = DatabasePool.create(
        settings.database_url,
        max_connections=settings.database_max_connections,
        acquire_timeout=settings.database_acquire_timeout,
    )
    await database.connect()

    try:
        cache = CachePool.create(settings.valkey_url, size=settings.valkey_pool_size)
        await cache.init()
    except Exception:
        await database.close()
        raise

    return AppContext(database=database, cache=cache)
