"""
Adapter: SQL user repository.

Implements UserRepository port with SQLAlchemy Core against the
``users`` table (see ``schema.py``). Works with SQLite and PostgreSQL.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from accounts.domain.users.entities import User
from accounts.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

_SELECT_USERS = "SELECT id, name, email, password, created_at FROM users"


def _row_to_user(row) -> User:
    """Map a result row to a User entity."""
    return User(
        id=row[0],
        name=row[1],
        email=row[2],
        password=row[3],
        created_at=datetime.fromisoformat(row[4]),
    )


class SqlUserRepository(UserRepository):
    """SQLAlchemy adapter for the users table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_all(self) -> list[User]:
        query = text(f"{_SELECT_USERS} ORDER BY created_at ASC, id ASC")
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_user(r) for r in rows]

    def get_by_id(self, user_id: str) -> Optional[User]:
        query = text(f"{_SELECT_USERS} WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": user_id}).fetchone()
        return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        query = text(f"{_SELECT_USERS} WHERE email = :email")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"email": email}).fetchone()
        return _row_to_user(row) if row else None

    def add(self, user: User) -> bool:
        """Insert a user. Returns False if the email (or ID) already exists."""
        query = text(
            """
            INSERT INTO users (id, name, email, password, created_at)
            VALUES (:id, :name, :email, :password, :created_at)
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    query,
                    {
                        "id": user.id,
                        "name": user.name,
                        "email": user.email,
                        "password": user.password,
                        "created_at": user.created_at.isoformat(),
                    },
                )
        except IntegrityError:
            logger.warning("Insert rejected by constraint for id=%s", user.id)
            return False
        return True

    def update(self, user_id: str, name: str, email: str) -> bool:
        query = text("UPDATE users SET name = :name, email = :email WHERE id = :id")
        try:
            with self._engine.begin() as conn:
                result = conn.execute(query, {"id": user_id, "name": name, "email": email})
        except IntegrityError:
            logger.warning("Update rejected by constraint for id=%s", user_id)
            return False
        return result.rowcount > 0

    def update_password(self, user_id: str, password_hash: str) -> bool:
        query = text("UPDATE users SET password = :password WHERE id = :id")
        with self._engine.begin() as conn:
            result = conn.execute(query, {"id": user_id, "password": password_hash})
        return result.rowcount > 0

    def delete(self, user_id: str) -> bool:
        query = text("DELETE FROM users WHERE id = :id")
        with self._engine.begin() as conn:
            result = conn.execute(query, {"id": user_id})
        return result.rowcount > 0
