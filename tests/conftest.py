"""
Shared pytest fixtures.

Environment overrides are applied before the application package is
imported so that ``Settings`` picks them up: rate limiting off, users
kept in memory, cheap password hashing.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("USE_IN_MEMORY_STORE", "true")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
from fastapi.testclient import TestClient

from accounts.application.users.service import UsersService
from accounts.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from accounts.infrastructure.users.password_hasher import Pbkdf2PasswordHasher
from accounts.interfaces.users.dependencies import get_users_service
from accounts.main import app


@pytest.fixture
def hasher() -> Pbkdf2PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=1000)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(
    repository: InMemoryUserRepository, hasher: Pbkdf2PasswordHasher
) -> UsersService:
    return UsersService(repository=repository, hasher=hasher)


@pytest.fixture
def client(service: UsersService):
    """TestClient whose users service is a fresh in-memory instance."""
    app.dependency_overrides[get_users_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
