"""SQL implementation of UserStore.

Each operation borrows one connection and runs one parameterized
statement. Store failures are translated into domain errors here.
"""

import logging
from typing import Any

from sqlalchemy import TextClause, text
from sqlalchemy.exc import SQLAlchemyError

from commerce_api.entities import UserEntity
from commerce_api.errors import QueryError, StoreConnectionError, describe

from .database_pool import DatabasePool

logger = logging.getLogger(__name__)

INSERT_USER = text("INSERT INTO users (name, username, email) VALUES (:name, :username, :email)")
SELECT_USER = text("SELECT name, username, email FROM users WHERE username = :username")
UPDATE_USER = text("UPDATE users SET name = :name, email = :email WHERE username = :username")
DELETE_USER = text("DELETE FROM users WHERE username = :username")


class SqlUserRepository:
    """Users stored in a ``users`` table of the relational store.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, pool: DatabasePool) -> None:
        """Initialize the repository.

        Args:
            pool: Shared relational connection pool.
        """
        self._pool = pool

    async def create(self, user: UserEntity) -> None:
        await self._execute(
            INSERT_USER,
            {"name": user.name, "username": user.username, "email": user.email},
        )

    async def get(self, username: str) -> UserEntity:
        """Fetch exactly one user.

        Connection failures are reported as QueryError here, like any
        other failure of the lookup.
        """
        try:
            async with self._pool.acquire() as conn:
                result = await conn.execute(SELECT_USER, {"username": username})
                row = result.one()
        except StoreConnectionError as e:
            raise QueryError(e.message) from e
        except SQLAlchemyError as e:
            raise QueryError(describe(e)) from e

        return UserEntity(**row._mapping)

    async def update(self, user: UserEntity) -> None:
        matched = await self._execute(
            UPDATE_USER,
            {"name": user.name, "email": user.email, "username": user.username},
        )
        logger.debug("update %s matched %d row(s)", user.username, matched)

    async def delete(self, username: str) -> None:
        matched = await self._execute(DELETE_USER, {"username": username})
        logger.debug("delete %s matched %d row(s)", username, matched)

    async def _execute(self, statement: TextClause, params: dict[str, Any]) -> int:
        """Run one write statement and commit it.

        Returns:
            Number of rows matched

        Raises:
            StoreConnectionError: If no connection can be borrowed
            QueryError: If the statement or the commit fails
        """
        async with self._pool.acquire() as conn:
            try:
                result = await conn.execute(statement, params)
                matched = result.rowcount
                await conn.commit()
            except SQLAlchemyError as e:
                raise QueryError(describe(e)) from e

        return matched
