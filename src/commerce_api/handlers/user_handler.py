"""HTTP handlers for user operations."""

from fastapi import Response, status

from commerce_api.dto import UserRequest, UserResponse
from commerce_api.entities import UserEntity
from commerce_api.protocols import UserStore


class UserHandler:
    """HTTP handlers for the user resource.

    Example:
        ```python
        handler = UserHandler(user_store=SqlUserRepository(pool))

        @router.get("/{username}", response_model=UserResponse)
        async def get_user(username: str):
            return await handler.get_user(username)
        ```
    """

    def __init__(self, user_store: UserStore) -> None:
        """Initialize the user handler.

        Args:
            user_store: Storage backend for users (required).
        """
        self._users = user_store

    async def create_user(self, request: UserRequest) -> Response:
        """Handle POST /user/ requests.

        Returns:
            201 Created with an empty body
        """
        await self._users.create(_to_entity(request))
        return Response(status_code=status.HTTP_201_CREATED)

    async def get_user(self, username: str) -> UserResponse:
        """Handle GET /user/{username} requests.

        A username with no row fails as a QueryError (500), not a 404.
        """
        user = await self._users.get(username)
        return UserResponse(name=user.name, username=user.username, email=user.email)

    async def update_user(self, request: UserRequest) -> Response:
        """Handle PUT /user/ requests.

        Returns:
            200 OK with an empty body, whether or not a row matched
        """
        await self._users.update(_to_entity(request))
        return Response(status_code=status.HTTP_200_OK)

    async def delete_user(self, username: str) -> Response:
        """Handle DELETE /user/{username} requests.

        Returns:
            204 No Content, whether or not a row matched
        """
        await self._users.delete(username)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_entity(request: UserRequest) -> UserEntity:
    return UserEntity(name=request.name, username=request.username, email=request.email)
