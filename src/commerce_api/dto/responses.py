"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Response DTO for a single user."""

    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Contact address")


class ErrorResponse(BaseModel):
    """Error envelope returned for every domain error."""

    code: int = Field(..., description="HTTP status code of the response")
    message: str = Field(..., description="Description of the underlying failure")
