"""
In‑memory adapter of the user persistence gateway.

Useful for tests and for running the API without a database file.  Ids
come from a counter that only moves forward, so deleted ids are never
handed out again.  A lock keeps the counter and the dict consistent when
the threadpool serves concurrent requests.
"""

import itertools
import threading
from datetime import date
from typing import Dict, List

from ..core.exceptions import NotFoundError
from .base import StoredUser, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: Dict[int, StoredUser] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, name: str, dob: date) -> StoredUser:
        with self._lock:
            user = StoredUser(id=next(self._ids), name=name, date_of_birth=dob)
            self._users[user.id] = user
        return user

    def get(self, user_id: int) -> StoredUser:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return user

    def list(self, limit: int, offset: int) -> List[StoredUser]:
        with self._lock:
            ordered = sorted(self._users.values(), key=lambda user: user.id)
        return ordered[offset:offset + limit]

    def update(self, user_id: int, name: str, dob: date) -> StoredUser:
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError(user_id)
            user = StoredUser(id=user_id, name=name, date_of_birth=dob)
            self._users[user_id] = user
        return user

    def delete(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise NotFoundError(user_id)
