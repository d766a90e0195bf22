"""
Shared pytest fixtures for the User Vault API.

Fixtures build every collaborator explicitly: the service gets an
in‑memory repository and a pinned ``today``; the HTTP client gets an
application wired to a SQLite file under ``tmp_path``.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from user_vault_api.app.core.config import Settings
from user_vault_api.app.core.db import init_db
from user_vault_api.app.main import create_app
from user_vault_api.app.repositories.memory import InMemoryUserRepository
from user_vault_api.app.repositories.sqlite import SQLiteUserRepository
from user_vault_api.app.services.user_service import UserService

TODAY = date(2025, 12, 31)


@pytest.fixture
def memory_repo():
    """Empty in‑memory repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def service(memory_repo):
    """Service whose ages are computed as of ``TODAY``."""
    return UserService(memory_repo, today=lambda: TODAY)


@pytest.fixture
def database_path(tmp_path):
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_repo(database_path):
    return SQLiteUserRepository(database_path)


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'api.db'}", log_level="WARNING")


@pytest.fixture
def app(settings):
    application = create_app(settings)
    repository = application.state.user_service.repository
    application.state.user_service = UserService(repository, today=lambda: TODAY)
    return application


@pytest.fixture
def client(app):
    """HTTP client; entering the context runs the startup migrations."""
    with TestClient(app) as test_client:
        yield test_client
