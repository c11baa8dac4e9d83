"""Routers, one per resource, mounted under the version prefix."""

from . import greeting, stubs, users

__all__ = [
    "greeting",
    "stubs",
    "users",
]
