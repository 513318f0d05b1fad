"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """A registered user account.

    ``password`` always holds the hashed form produced by a
    PasswordHasher; the plain text never reaches an entity.
    """

    id: str
    name: str
    email: str
    password: str
    created_at: datetime = field(default_factory=_utcnow)
