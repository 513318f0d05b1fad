"""In-memory user repository for tests and local runs."""

from dataclasses import replace
from typing import Dict, Optional

from accounts.domain.users.entities import User
from accounts.domain.users.ports import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Stores users in a dict keyed by ID; insertion order is listing
    order. Enforces email uniqueness like the SQL adapter.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def list_all(self) -> list[User]:
        return list(self._users.values())

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def add(self, user: User) -> bool:
        if user.id in self._users or self.get_by_email(user.email) is not None:
            return False
        self._users[user.id] = user
        return True

    def update(self, user_id: str, name: str, email: str) -> bool:
        user = self._users.get(user_id)
        if user is None:
            return False
        owner = self.get_by_email(email)
        if owner is not None and owner.id != user_id:
            return False
        self._users[user_id] = replace(user, name=name, email=email)
        return True

    def update_password(self, user_id: str, password_hash: str) -> bool:
        user = self._users.get(user_id)
        if user is None:
            return False
        self._users[user_id] = replace(user, password=password_hash)
        return True

    def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None
