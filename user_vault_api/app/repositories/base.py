"""
Contract of the user persistence gateway.

Adapters translate the five operations below to a concrete store.
They perform no business validation; ``limit`` and ``offset`` are
trusted to be valid.  A missing id is reported with ``NotFoundError``
and every other store failure with ``StoreError``.

Implementations:
- ``SQLiteUserRepository`` (``sqlite3``)
- ``InMemoryUserRepository`` (tests and database‑less runs)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List


@dataclass(frozen=True)
class StoredUser:
    """A user record exactly as persisted, before any age is derived."""

    id: int
    name: str
    date_of_birth: date


class UserRepository(ABC):
    """Store‑agnostic CRUD operations on users."""

    @abstractmethod
    def create(self, name: str, dob: date) -> StoredUser:
        """Insert a user and return it with its store‑assigned ``id``.

        Raises:
            StoreError: If the store rejects the insert.
        """

    @abstractmethod
    def get(self, user_id: int) -> StoredUser:
        """Fetch one user.

        Raises:
            NotFoundError: If no user has ``user_id``.
            StoreError: If the store fails.
        """

    @abstractmethod
    def list(self, limit: int, offset: int) -> List[StoredUser]:
        """Return at most ``limit`` users after skipping ``offset``, ordered by id.

        Raises:
            StoreError: If the store fails.
        """

    @abstractmethod
    def update(self, user_id: int, name: str, dob: date) -> StoredUser:
        """Replace name and date of birth of an existing user.

        Raises:
            NotFoundError: If no user has ``user_id``.
            StoreError: If the store fails.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove a user.

        Raises:
            NotFoundError: If no user has ``user_id``.
            StoreError: If the store fails.
        """
