"""User storage protocol.

Defines the interface for any backend that can persist users.
The handler layer depends on this protocol, not on SQLAlchemy.
"""

from typing import Protocol, runtime_checkable

from commerce_api.entities import UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user storage backends.

    Implementations raise ``StoreConnectionError`` when no connection can be
    borrowed and ``QueryError`` when a statement fails.
    """

    async def create(self, user: UserEntity) -> None:
        """Insert a new user.

        Args:
            user: The user to insert

        Raises:
            QueryError: If the insert fails, including a duplicate username
        """
        ...

    async def get(self, username: str) -> UserEntity:
        """Fetch exactly one user by username.

        Args:
            username: The username to look up

        Returns:
            The stored user

        Raises:
            QueryError: If the lookup fails or no row matches
        """
        ...

    async def update(self, user: UserEntity) -> None:
        """Overwrite name and email of the user with ``user.username``.

        Matching no row is not an error.
        """
        ...

    async def delete(self, username: str) -> None:
        """Delete the user with ``username``.

        Matching no row is not an error.
        """
        ...
