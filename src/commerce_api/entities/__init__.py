"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by handlers
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .user import UserEntity

__all__ = ["UserEntity"]
