"""User domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a stored user.

    Attributes:
        name: Display name
        username: Unique natural key; the store enforces uniqueness
        email: Contact address
    """

    name: str
    username: str
    email: str
