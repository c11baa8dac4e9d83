"""Handler layer for HTTP endpoints.

Handlers convert between DTOs and entities and pick status codes.
Domain errors raised below them propagate to the exception handler
registered in ``commerce_api.errors``.

Architecture:
    Route -> Handler -> Repository
    (HTTP) -> (DTO/status) -> (Data Access)
"""

from .greeting_handler import GreetingHandler
from .user_handler import UserHandler

__all__ = [
    "GreetingHandler",
    "UserHandler",
]
