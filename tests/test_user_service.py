"""
Unit tests for ``UserService``.

Strategy:
- ``InMemoryUserRepository`` isolates the service from any database
- ``Mock(spec=UserRepository)`` checks what reaches the repository
- ``today`` is pinned so ages are deterministic
"""

import logging
from datetime import date
from unittest.mock import Mock

import pytest

from user_vault_api.app.core.exceptions import NotFoundError, StoreError, ValidationError
from user_vault_api.app.repositories.base import StoredUser, UserRepository
from user_vault_api.app.repositories.memory import InMemoryUserRepository
from user_vault_api.app.services.user_service import User, UserService


def service_as_of(repository, as_of):
    return UserService(repository, today=lambda: as_of)


class TestCreateUser:
    def test_returns_stored_user_with_age(self, service):
        user = service.create_user("Ada", "1990-01-10")

        assert user == User(id=1, name="Ada", date_of_birth=date(1990, 1, 10), age=35)

    def test_assigns_increasing_ids(self, service):
        first = service.create_user("Ada", "1990-01-10")
        second = service.create_user("Grace", "1906-12-09")

        assert second.id > first.id

    @pytest.mark.parametrize(
        "name, dob, field",
        [
            ("", "1990-01-10", "name"),
            ("x" * 256, "1990-01-10", "name"),
            ("Ada", "1990-13-10", "dob"),
            ("Ada", "10/01/1990", "dob"),
        ],
    )
    def test_invalid_input_never_reaches_repository(self, name, dob, field):
        repository = Mock(spec=UserRepository)
        service = UserService(repository)

        with pytest.raises(ValidationError) as excinfo:
            service.create_user(name, dob)

        assert excinfo.value.field == field
        repository.create.assert_not_called()

    def test_passes_parsed_date_to_repository(self):
        repository = Mock(spec=UserRepository)
        repository.create.return_value = StoredUser(1, "Ada", date(1990, 1, 10))
        service = service_as_of(repository, date(2025, 1, 1))

        service.create_user("Ada", "1990-01-10")

        repository.create.assert_called_once_with("Ada", date(1990, 1, 10))

    def test_store_error_propagates_unchanged(self):
        repository = Mock(spec=UserRepository)
        error = StoreError("disk full")
        repository.create.side_effect = error
        service = UserService(repository)

        with pytest.raises(StoreError) as excinfo:
            service.create_user("Ada", "1990-01-10")

        assert excinfo.value is error
        assert repository.create.call_count == 1


class TestGetUser:
    @pytest.mark.parametrize(
        "dob, as_of, expected_age",
        [
            ("1990-01-10", date(2025, 12, 31), 35),
            ("1990-05-10", date(2025, 5, 10), 35),
            ("1990-12-31", date(2025, 1, 1), 34),
            ("2100-01-01", date(2025, 1, 1), 0),
        ],
    )
    def test_age_as_of_reference_date(self, memory_repo, dob, as_of, expected_age):
        created = service_as_of(memory_repo, date(2025, 1, 1)).create_user("Ada", dob)

        user = service_as_of(memory_repo, as_of).get_user(created.id)

        assert user.age == expected_age
        assert user.name == "Ada"

    def test_age_is_recomputed_on_every_read(self, memory_repo):
        created = service_as_of(memory_repo, date(2025, 1, 1)).create_user("Ada", "1990-05-10")

        assert service_as_of(memory_repo, date(2025, 5, 9)).get_user(created.id).age == 34
        assert service_as_of(memory_repo, date(2025, 5, 10)).get_user(created.id).age == 35

    def test_missing_user(self, service):
        with pytest.raises(NotFoundError):
            service.get_user(42)


class TestListUsers:
    def test_limit_and_offset(self, service):
        for name in ("Ada", "Grace", "Edsger"):
            service.create_user(name, "1990-01-10")

        first_page = service.list_users(limit=2, offset=0)
        second_page = service.list_users(limit=2, offset=2)

        assert [user.name for user in first_page] == ["Ada", "Grace"]
        assert [user.name for user in second_page] == ["Edsger"]

    def test_empty_store(self, service):
        assert service.list_users(limit=50, offset=0) == []

    def test_samples_today_once_per_response(self, memory_repo):
        for name in ("Ada", "Grace", "Edsger"):
            memory_repo.create(name, date(1990, 5, 10))
        days = iter([date(2025, 5, 9), date(2025, 5, 10), date(2025, 5, 11)])
        today = Mock(side_effect=lambda: next(days))
        service = UserService(memory_repo, today=today)

        users = service.list_users(limit=10, offset=0)

        assert today.call_count == 1
        assert {user.age for user in users} == {34}


class TestUpdateUser:
    def test_replaces_fields_and_recomputes_age(self, service):
        created = service.create_user("Ada", "1990-01-10")

        updated = service.update_user(created.id, "Ada King", "2000-01-10")

        assert updated == User(id=created.id, name="Ada King", date_of_birth=date(2000, 1, 10), age=25)
        assert service.get_user(created.id).name == "Ada King"

    def test_validation_runs_before_repository(self):
        repository = Mock(spec=UserRepository)
        service = UserService(repository)

        with pytest.raises(ValidationError):
            service.update_user(1, "Ada", "2025-02-30")

        repository.update.assert_not_called()

    def test_missing_user(self, service):
        with pytest.raises(NotFoundError):
            service.update_user(99, "Ada", "1990-01-10")


class TestDeleteUser:
    def test_removes_user(self, service):
        created = service.create_user("Ada", "1990-01-10")

        service.delete_user(created.id)

        with pytest.raises(NotFoundError):
            service.get_user(created.id)

    def test_missing_user_is_not_found_not_store_error(self, service):
        with pytest.raises(NotFoundError) as excinfo:
            service.delete_user(12345)

        assert not isinstance(excinfo.value, StoreError)
        assert excinfo.value.user_id == 12345

    def test_ids_are_not_reused(self):
        repository = InMemoryUserRepository()
        service = UserService(repository, today=lambda: date(2025, 1, 1))
        first = service.create_user("Ada", "1990-01-10")
        service.delete_user(first.id)

        second = service.create_user("Grace", "1906-12-09")

        assert second.id != first.id


SERVICE_LOGGER = "user_vault_api.app.services.user_service"


def service_messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == SERVICE_LOGGER]


class TestLogging:
    def test_successful_writes_are_logged(self, service, caplog):
        caplog.set_level(logging.INFO, logger="user_vault_api")

        created = service.create_user("Ada", "1990-01-10")
        service.update_user(created.id, "Ada King", "1815-12-10")
        service.delete_user(created.id)

        assert service_messages(caplog) == [
            f"Created user {created.id}",
            f"Updated user {created.id}",
            f"Deleted user {created.id}",
        ]
        assert all(
            record.levelno == logging.INFO for record in caplog.records if record.name == SERVICE_LOGGER
        )

    def test_reads_and_failures_are_not_logged(self, service, caplog):
        caplog.set_level(logging.INFO, logger="user_vault_api")
        created = service.create_user("Ada", "1990-01-10")
        caplog.clear()

        service.get_user(created.id)
        service.list_users(limit=10, offset=0)
        with pytest.raises(ValidationError):
            service.create_user("", "1990-01-10")
        with pytest.raises(NotFoundError):
            service.delete_user(999)

        assert service_messages(caplog) == []
