"""
Shared fixtures: a SQLite file database seeded with three users.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from commerce_api.api.app import create_app
from commerce_api.api.context import AppContext
from commerce_api.config import Settings
from commerce_api.repositories import CachePool, DatabasePool

CREATE_USERS = text(
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        username TEXT NOT NULL UNIQUE,
        email TEXT NOT NULL
    )
    """
)

SEED_USERS = [
    {"name": "js", "username": "javascript", "email": "javascript@example.com"},
    {"name": "typescript", "username": "typescript", "email": "ts@example.com"},
    {"name": "rs", "username": "rust", "email": "rust@example.com"},
]


async def seed_users(pool: DatabasePool) -> None:
    """Create the users table and insert the seed rows."""
    async with pool.acquire() as conn:
        await conn.execute(CREATE_USERS)
        await conn.execute(
            text("INSERT INTO users (name, username, email) VALUES (:name, :username, :email)"),
            SEED_USERS,
        )
        await conn.commit()


async def seeded_context(settings: Settings) -> AppContext:
    """Context factory for tests.

    The cache pool is built but never contacted, so no Valkey server
    is needed.
    """
    database = DatabasePool.create(
        settings.database_url,
        max_connections=settings.database_max_connections,
        acquire_timeout=settings.database_acquire_timeout,
    )
    await database.connect()
    await seed_users(database)
    cache = CachePool.create(settings.valkey_url, size=settings.valkey_pool_size)
    return AppContext(database=database, cache=cache)


@pytest.fixture
def prepare_database():
    """Coroutine function that creates and seeds the users table in a pool."""
    return seed_users


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'commerce.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(
        database_url=database_url,
        valkey_url="valkey://127.0.0.1:6379",
        database_acquire_timeout=5.0,
    )


@pytest.fixture
def app(settings):
    return create_app(settings, context_factory=seeded_context)


@pytest.fixture
def client(app):
    """Create a test client with the lifespan running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def single_connection_client(database_url):
    """Test client whose pool holds one connection and gives up after 0.2s."""
    settings = Settings(
        database_url=database_url,
        valkey_url="valkey://127.0.0.1:6379",
        database_max_connections=1,
        database_acquire_timeout=0.2,
    )
    app = create_app(settings, context_factory=seeded_context)
    with TestClient(app) as client:
        yield client
