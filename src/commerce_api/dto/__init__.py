"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal logic should use entities from the entities package.
"""

from .requests import UserRequest
from .responses import ErrorResponse, UserResponse

__all__ = [
    "UserRequest",
    "UserResponse",
    "ErrorResponse",
]
