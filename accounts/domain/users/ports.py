"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving user accounts."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user, oldest first."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user registered with ``email``, or None."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> bool:
        """Persist a new user.

        Returns:
            True if stored, False if the email is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: str, name: str, email: str) -> bool:
        """Change a user's name and email.

        Returns:
            True if a user was updated, False if it does not exist or
            the email belongs to another user.
        """
        raise NotImplementedError

    @abstractmethod
    def update_password(self, user_id: str, password_hash: str) -> bool:
        """Replace the stored password hash. Returns True if a user was updated."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Remove a user. Returns True if a user was deleted."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash of ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Return True if ``password`` matches the encoded hash."""
        raise NotImplementedError


class UserServicePort(ABC):
    """Port for the service the request handlers delegate to.

    Implementations own persistence and business rules such as
    password hashing and password-change validation.
    """

    @abstractmethod
    def get_users(self) -> list[User]:
        """Return all users."""
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def is_email_available(self, email: str) -> bool:
        """Return True when no user is registered with ``email``."""
        raise NotImplementedError

    @abstractmethod
    def create_user(self, name: str, email: str, password: str) -> bool:
        """Register a user. Returns True on success."""
        raise NotImplementedError

    @abstractmethod
    def update_user(self, user_id: str, name: str, email: str) -> bool:
        """Change a user's name and email. Returns True on success."""
        raise NotImplementedError

    @abstractmethod
    def delete_user(self, user_id: str) -> bool:
        """Delete a user. Returns True on success."""
        raise NotImplementedError

    @abstractmethod
    def change_password(
        self, user_id: str, oldpass: str, newpass: str, copass: str
    ) -> bool:
        """Replace a user's password after validating the request.

        Returns:
            True if the password was changed.
        """
        raise NotImplementedError
