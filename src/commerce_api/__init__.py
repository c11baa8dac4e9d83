"""Commerce API - user CRUD over a pooled relational store.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (UserStore)
    - repositories: Connection pools and SQL statements
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - errors: Domain error kinds and their HTTP mapping

Usage:
    ```python
    from commerce_api.repositories import DatabasePool, SqlUserRepository

    pool = DatabasePool.create("sqlite:///app.db", max_connections=2)
    users = SqlUserRepository(pool)
    user = await users.get("javascript")
    ```

For HTTP API:
    ```python
    from commerce_api.api.app import app
    ```
"""

from commerce_api.config import Settings, get_settings
from commerce_api.dto import ErrorResponse, UserRequest, UserResponse
from commerce_api.entities import UserEntity
from commerce_api.errors import AppError, QueryError, StoreConnectionError
from commerce_api.handlers import GreetingHandler, UserHandler
from commerce_api.protocols import UserStore
from commerce_api.repositories import CachePool, DatabasePool, SqlUserRepository

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "AppError",
    "StoreConnectionError",
    "QueryError",
    # Protocols (interfaces)
    "UserStore",
    # Handlers (HTTP)
    "UserHandler",
    "GreetingHandler",
    # Repositories (data access)
    "CachePool",
    "DatabasePool",
    "SqlUserRepository",
    # Entities (domain models)
    "UserEntity",
    # DTOs (API contracts)
    "UserRequest",
    "UserResponse",
    "ErrorResponse",
]
