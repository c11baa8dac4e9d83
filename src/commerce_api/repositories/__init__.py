"""Repository layer for data access.

This layer owns the store connection pools and the SQL statements.
Store-specific exceptions never leave it: they are translated into
StoreConnectionError or QueryError.
"""

from commerce_api.protocols import UserStore

from .cache_pool import CachePool
from .database_pool import DatabasePool
from .user_repository import SqlUserRepository

__all__ = [
    "UserStore",
    "CachePool",
    "DatabasePool",
    "SqlUserRepository",
]
