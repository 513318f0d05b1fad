"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching one user.

    Attributes:
        user_id: Identifier taken from the request path.
    """

    user_id: str


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user.

    Attributes:
        name: Display name.
        email: Login email, must not be registered yet.
        password: Plain text password.
        cpass: Confirmation; must equal ``password``.
    """

    name: str
    email: str
    password: str
    cpass: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for changing a user's name and email."""

    user_id: str
    name: str
    email: str


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a user."""

    user_id: str


@dataclass(frozen=True)
class ChangePasswordCommand:
    """Input DTO for changing a password.

    Attributes:
        user_id: Identifier taken from the request path.
        oldpass: Current password.
        newpass: Replacement password.
        copass: Confirmation; the service checks it against ``newpass``.
    """

    user_id: str
    oldpass: str
    newpass: str
    copass: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user. Never carries the password hash."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class CreatedUserResult:
    """Output DTO echoing the registered name and email."""

    name: str
    email: str


@dataclass(frozen=True)
class UserIdResult:
    """Output DTO echoing the affected user ID."""

    id: str


@dataclass(frozen=True)
class MessageResult:
    """Output DTO carrying a human-readable confirmation."""

    message: str
