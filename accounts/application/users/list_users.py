"""
Use case: List all user accounts.

Input: none
Output: Ok(list[UserResult]), never Err
Side effects: None.
Failure cases: None reported; service exceptions propagate unchanged.
"""

import logging

from accounts.application.users.dtos import UserResult
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Ok

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns every registered user."""

    def __init__(self, service: UserServicePort) -> None:
        self._service = service

    def execute(self) -> Ok[list[UserResult]]:
        """Run the list use case."""
        users = self._service.get_users()
        logger.info("Listed %d users", len(users))
        return Ok([UserResult(id=u.id, name=u.name, email=u.email) for u in users])
