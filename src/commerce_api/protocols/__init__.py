"""Protocol interfaces for swappable implementations.

Handlers are typed against these protocols, so tests can substitute
in-memory or failing implementations.
"""

from .user_store import UserStore

__all__ = [
    "UserStore",
]
