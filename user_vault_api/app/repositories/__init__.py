"""
Persistence gateway for users.

``base`` defines the contract every store adapter implements.  The
service layer depends only on that contract; ``sqlite`` and ``memory``
provide the concrete adapters.
"""

from .base import StoredUser, UserRepository
from .memory import InMemoryUserRepository
from .sqlite import SQLiteUserRepository

__all__ = [
    "StoredUser",
    "UserRepository",
    "InMemoryUserRepository",
    "SQLiteUserRepository",
]
