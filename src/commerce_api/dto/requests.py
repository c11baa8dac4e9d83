"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    """Request DTO for creating or updating a user.

    On update, ``username`` selects the row and is never written.
    """

    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique username, used as the lookup key")
    email: str = Field(..., description="Contact address (not format-validated)")
