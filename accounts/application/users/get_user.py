"""
Use case: Fetch a single user account.

Input: GetUserQuery (user_id)
Output: Ok(UserResult)
Side effects: None.
Failure cases: UNPROCESSABLE_ENTITY when the user does not exist.
"""

import logging

from accounts.application.users.dtos import GetUserQuery, UserResult
from accounts.domain.users.errors import ErrorFactory, UserError
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Looks up one user by ID."""

    def __init__(self, service: UserServicePort, errors: ErrorFactory) -> None:
        self._service = service
        self._errors = errors

    def execute(self, query: GetUserQuery) -> Result[UserResult, UserError]:
        """Run the get-user use case.

        Args:
            query: Carries the user ID from the request path.

        Returns:
            Ok with the user, or Err(UNPROCESSABLE_ENTITY) if absent.
        """
        user = self._service.get_user(query.user_id)
        if not user:
            logger.info("User not found id=%s", query.user_id)
            return Err(self._errors.unprocessable_entity("Unknown user"))

        return Ok(UserResult(id=user.id, name=user.name, email=user.email))
