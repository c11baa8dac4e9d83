"""
Tests for building and tearing down the shared context.
"""

import pytest

from commerce_api.api.context import build_context
from commerce_api.config import Settings
from commerce_api.errors import StoreConnectionError
from commerce_api.repositories import DatabasePool


@pytest.fixture
def closed_pools(monkeypatch):
    """Record every DatabasePool that gets closed."""
    closed = []
    original_close = DatabasePool.close

    async def close(self):
        closed.append(self)
        await original_close(self)

    monkeypatch.setattr(DatabasePool, "close", close)
    return closed


@pytest.mark.asyncio
async def test_bad_cache_url_closes_database(database_url, closed_pools):
    """Test that a rejected cache URL does not leak the connected database pool."""
    settings = Settings(database_url=database_url, valkey_url="memcached://127.0.0.1:11211")

    with pytest.raises(ValueError):
        await build_context(settings)

    assert len(closed_pools) == 1


@pytest.mark.asyncio
async def test_unreachable_cache_closes_database(database_url, closed_pools):
    """Test that a failed cache handshake closes the database pool."""
    # nothing listens on port 1
    settings = Settings(database_url=database_url, valkey_url="valkey://127.0.0.1:1")

    with pytest.raises(StoreConnectionError):
        await build_context(settings)

    assert len(closed_pools) == 1


@pytest.mark.asyncio
async def test_unreachable_database_is_fatal(tmp_path):
    """Test that startup fails before the cache is touched."""
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'missing' / 'commerce.db'}",
        valkey_url="valkey://127.0.0.1:1",
    )

    with pytest.raises(StoreConnectionError):
        await build_context(settings)
