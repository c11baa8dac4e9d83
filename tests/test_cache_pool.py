"""
Tests for the cache store pool.
"""

import pytest

from commerce_api.errors import StoreConnectionError
from commerce_api.repositories import CachePool
from commerce_api.repositories.cache_pool import redis_url


@pytest.mark.parametrize(
    ("configured", "expected"),
    [
        ("valkey://127.0.0.1:6379", "redis://127.0.0.1:6379"),
        ("valkeys://cache:6380/1", "rediss://cache:6380/1"),
        ("redis://127.0.0.1:6379/0", "redis://127.0.0.1:6379/0"),
    ],
)
def test_redis_url(configured, expected):
    """Test Valkey scheme aliases."""
    assert redis_url(configured) == expected


def test_create_is_lazy():
    """Test that creating the pool does not connect."""
    pool = CachePool.create("valkey://127.0.0.1:6379", size=1)
    assert pool.size == 1
    assert pool.client.connection_pool.max_connections == 1


def test_create_rejects_unknown_scheme():
    """Test that an unsupported scheme is rejected."""
    with pytest.raises(ValueError):
        CachePool.create("memcached://127.0.0.1:11211")


@pytest.mark.asyncio
async def test_init_fails_when_store_is_down():
    """Test that init reports an unreachable store."""
    # nothing listens on port 1
    pool = CachePool.create("valkey://127.0.0.1:1", size=1)
    try:
        with pytest.raises(StoreConnectionError) as excinfo:
            await pool.init()
        assert excinfo.value.status_code == 503
    finally:
        await pool.close()
