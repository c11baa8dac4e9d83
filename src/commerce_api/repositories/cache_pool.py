"""Cache store (Valkey/Redis) client pool.

The pool is initialized once at startup. No request handler reads or
writes through it.
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from commerce_api.errors import StoreConnectionError, describe

logger = logging.getLogger(__name__)

_SCHEME_ALIASES = (
    ("valkeys://", "rediss://"),
    ("valkey://", "redis://"),
)


def redis_url(valkey_url: str) -> str:
    """Map ``valkey://`` and ``valkeys://`` URLs onto the schemes redis-py parses."""
    for alias, scheme in _SCHEME_ALIASES:
        if valkey_url.startswith(alias):
            return scheme + valkey_url[len(alias):]
    return valkey_url


class CachePool:
    """Fixed-size pool of cache store connections."""

    def __init__(self, client: redis.Redis, size: int) -> None:
        """Initialize the cache pool.

        Args:
            client: Redis client bound to a bounded connection pool.
            size: Maximum number of pooled connections.
        """
        self._client = client
        self._size = size

    @classmethod
    def create(cls, valkey_url: str, size: int = 1) -> "CachePool":
        """Factory method to build a pool from a connection string.

        Connections are opened lazily; call ``init()`` to verify the store.

        Raises:
            ValueError: If the URL scheme is not supported
        """
        pool = redis.ConnectionPool.from_url(redis_url(valkey_url), max_connections=size)
        return cls(redis.Redis(connection_pool=pool), size)

    async def init(self) -> None:
        """Connect and handshake with the cache store.

        Raises:
            StoreConnectionError: If the store does not answer a PING
        """
        try:
            await self._client.ping()
        except (RedisError, OSError) as e:
            raise StoreConnectionError(describe(e)) from e

        logger.info("Cache pool ready (%d connection(s))", self._size)

    async def close(self) -> None:
        """Close the client and disconnect every pooled connection."""
        await self._client.aclose()
        await self._client.connection_pool.disconnect()
        logger.info("Cache pool closed")

    @property
    def size(self) -> int:
        return self._size

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
