"""
Tests for UsersService.

Runs the service over the in-memory repository and a real (cheap)
PBKDF2 hasher. No database required.
"""

from accounts.application.users.service import UsersService
from accounts.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from accounts.infrastructure.users.password_hasher import Pbkdf2PasswordHasher


def _register(service: UsersService, email: str = "a@x.com", password: str = "p") -> str:
    assert service.create_user("A", email, password)
    return next(u.id for u in service.get_users() if u.email == email)


class TestUsersServiceCrud:
    """Create/read/update/delete through the service."""

    def test_create_hashes_password(
        self, service: UsersService, hasher: Pbkdf2PasswordHasher
    ) -> None:
        user_id = _register(service, password="secret")
        user = service.get_user(user_id)

        assert user is not None
        assert user.password != "secret"
        assert hasher.verify("secret", user.password)

    def test_email_availability(self, service: UsersService) -> None:
        assert service.is_email_available("a@x.com") is True
        _register(service)
        assert service.is_email_available("a@x.com") is False

    def test_duplicate_email_rejected(self, service: UsersService) -> None:
        _register(service)
        assert service.create_user("B", "a@x.com", "q") is False
        assert len(service.get_users()) == 1

    def test_get_unknown_user(self, service: UsersService) -> None:
        assert service.get_user("missing") is None

    def test_update_and_delete(self, service: UsersService) -> None:
        user_id = _register(service)

        assert service.update_user(user_id, "B", "b@x.com") is True
        assert service.get_user(user_id).email == "b@x.com"

        assert service.delete_user(user_id) is True
        assert service.delete_user(user_id) is False
        assert service.update_user(user_id, "C", "c@x.com") is False


class TestUsersServiceChangePassword:
    """Password change validation lives in the service."""

    def test_successful_change(
        self, service: UsersService, hasher: Pbkdf2PasswordHasher
    ) -> None:
        user_id = _register(service, password="old")

        assert service.change_password(user_id, "old", "new", "new") is True
        assert hasher.verify("new", service.get_user(user_id).password)

    def test_wrong_old_password(self, service: UsersService) -> None:
        user_id = _register(service, password="old")
        assert service.change_password(user_id, "nope", "new", "new") is False

    def test_mismatched_confirmation(self, service: UsersService) -> None:
        user_id = _register(service, password="old")
        assert service.change_password(user_id, "old", "new", "other") is False

    def test_unknown_user(self, service: UsersService) -> None:
        assert service.change_password("missing", "old", "new", "new") is False

    def test_failed_change_keeps_old_password(
        self, repository: InMemoryUserRepository, hasher: Pbkdf2PasswordHasher
    ) -> None:
        service = UsersService(repository=repository, hasher=hasher)
        user_id = _register(service, password="old")

        service.change_password(user_id, "old", "new", "other")

        assert hasher.verify("old", repository.get_by_id(user_id).password)
