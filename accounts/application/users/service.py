"""
Users service.

Implements UserServicePort on top of the UserRepository and
PasswordHasher ports. Owns the business rules the request handlers
delegate: id assignment, password hashing and password-change checks.
"""

import logging
from typing import Optional
from uuid import uuid4

from accounts.domain.users.entities import User
from accounts.domain.users.ports import (
    PasswordHasher,
    UserRepository,
    UserServicePort,
)

logger = logging.getLogger(__name__)


class UsersService(UserServicePort):
    """Service collaborator used by every users request handler."""

    def __init__(self, repository: UserRepository, hasher: PasswordHasher) -> None:
        self._repository = repository
        self._hasher = hasher

    def get_users(self) -> list[User]:
        return self._repository.list_all()

    def get_user(self, user_id: str) -> Optional[User]:
        return self._repository.get_by_id(user_id)

    def is_email_available(self, email: str) -> bool:
        return self._repository.get_by_email(email) is None

    def create_user(self, name: str, email: str, password: str) -> bool:
        """Hash the password and store a new user under a fresh ID.

        Returns:
            False when the repository rejects the user (duplicate email).
        """
        user = User(
            id=uuid4().hex,
            name=name,
            email=email,
            password=self._hasher.hash(password),
        )
        created = self._repository.add(user)
        if created:
            logger.info("Created user id=%s", user.id)
        else:
            logger.warning("Repository rejected new user")
        return created

    def update_user(self, user_id: str, name: str, email: str) -> bool:
        updated = self._repository.update(user_id, name, email)
        logger.info("Update user id=%s updated=%s", user_id, updated)
        return updated

    def delete_user(self, user_id: str) -> bool:
        deleted = self._repository.delete(user_id)
        logger.info("Delete user id=%s deleted=%s", user_id, deleted)
        return deleted

    def change_password(
        self, user_id: str, oldpass: str, newpass: str, copass: str
    ) -> bool:
        """Validate and apply a password change.

        The change is refused when the user does not exist, ``oldpass``
        does not match the stored hash, or ``newpass`` and ``copass``
        differ.

        Returns:
            True if the new hash was stored.
        """
        user = self._repository.get_by_id(user_id)
        if user is None:
            logger.warning("Password change for unknown user id=%s", user_id)
            return False

        if not self._hasher.verify(oldpass, user.password):
            logger.warning("Password change with wrong current password id=%s", user_id)
            return False

        if newpass != copass:
            logger.warning("Password change with mismatched confirmation id=%s", user_id)
            return False

        return self._repository.update_password(user_id, self._hasher.hash(newpass))
