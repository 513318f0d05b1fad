"""
Error descriptors for the users bounded context.

Request handlers never raise these: they build a ``UserError`` through
an injected ``ErrorFactory`` and return it wrapped in ``Err``. The
interface layer maps each kind to an HTTP response in one place.
No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Failure categories a request handler can report."""

    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    EMAIL_ALREADY_TAKEN = "EMAIL_ALREADY_TAKEN"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    GENERIC = "GENERIC"


@dataclass(frozen=True)
class UserError:
    """A (kind, message) pair describing why an operation failed."""

    kind: ErrorKind
    message: str


class ErrorFactory:
    """Builds UserError values.

    Injected into every use case so that error construction is an
    explicit collaborator rather than a module-level import.
    """

    def build(self, kind: ErrorKind, message: str) -> UserError:
        """Return a UserError of the given kind."""
        return UserError(kind=kind, message=message)

    def unprocessable_entity(self, message: str) -> UserError:
        return self.build(ErrorKind.UNPROCESSABLE_ENTITY, message)

    def email_already_taken(self, message: str = "Email already used") -> UserError:
        return self.build(ErrorKind.EMAIL_ALREADY_TAKEN, message)

    def invalid_password(self, message: str = "Passwords do not match") -> UserError:
        return self.build(ErrorKind.INVALID_PASSWORD, message)

    def generic(self, message: str) -> UserError:
        return self.build(ErrorKind.GENERIC, message)
