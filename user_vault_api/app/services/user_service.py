"""
Business logic for users.

``UserService`` is the single orchestration point for the five CRUD
verbs: it validates input, parses the date of birth, makes exactly one
repository call and shapes the result with a freshly computed age.
Repository errors (``NotFoundError``, ``StoreError``) propagate
unchanged; the HTTP layer decides how to present them.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List

from ..core.dates import calculate_age, parse_dob
from ..core.exceptions import ValidationError
from ..core.validation import validate_user_input
from ..repositories.base import StoredUser, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """A stored user together with its age on the day of the response."""

    id: int
    name: str
    date_of_birth: date
    age: int


class UserService:
    """Сервис для работы с пользователями.

    Обе зависимости передаются явно: ``repository`` это любой адаптер
    ``UserRepository``, ``today`` возвращает дату, на которую
    вычисляется возраст (по умолчанию ``date.today``; в тестах её
    фиксируют).
    """

    def __init__(self, repository: UserRepository, today: Callable[[], date] = date.today):
        self.repository = repository
        self.today = today

    def create_user(self, name: str, dob_text: str) -> User:
        """Validate the input, store a new user and return it with its age."""
        dob = self._validated_dob(name, dob_text)
        stored = self.repository.create(name, dob)
        logger.info("Created user %s", stored.id)
        return self._to_user(stored, self.today())

    def get_user(self, user_id: int) -> User:
        stored = self.repository.get(user_id)
        return self._to_user(stored, self.today())

    def list_users(self, limit: int, offset: int) -> List[User]:
        """Return one page of users.

        ``limit > 0`` and ``offset >= 0`` are the caller's responsibility.
        The date is sampled once so every item of the page is aged against
        the same day.
        """
        stored_users = self.repository.list(limit, offset)
        as_of = self.today()
        return [self._to_user(stored, as_of) for stored in stored_users]

    def update_user(self, user_id: int, name: str, dob_text: str) -> User:
        """Replace name and date of birth of an existing user."""
        dob = self._validated_dob(name, dob_text)
        stored = self.repository.update(user_id, name, dob)
        logger.info("Updated user %s", stored.id)
        return self._to_user(stored, self.today())

    def delete_user(self, user_id: int) -> None:
        self.repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

    @staticmethod
    def _validated_dob(name: str, dob_text: str) -> date:
        validate_user_input(name, dob_text)
        try:
            return parse_dob(dob_text)
        except ValueError:
            # validate_user_input has already parsed dob_text.
            raise ValidationError("dob") from None

    @staticmethod
    def _to_user(stored: StoredUser, as_of: date) -> User:
        return User(
            id=stored.id,
            name=stored.name,
            date_of_birth=stored.date_of_birth,
            age=calculate_age(stored.date_of_birth, as_of),
        )
