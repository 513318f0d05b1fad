"""
Use case: Update a user's name and email.

Input: UpdateUserCommand (user_id, name, email)
Output: Ok(UserIdResult)
Side effects: Mutates the stored user through the service.
Failure cases: EMAIL_ALREADY_TAKEN, UNPROCESSABLE_ENTITY.
"""

import logging

from accounts.application.users.dtos import UpdateUserCommand, UserIdResult
from accounts.domain.users.errors import ErrorFactory, UserError
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Orchestrates a profile update.

    The email availability check is evaluated before the update call,
    so a rejected email never reaches storage.
    """

    def __init__(self, service: UserServicePort, errors: ErrorFactory) -> None:
        self._service = service
        self._errors = errors

    def execute(self, command: UpdateUserCommand) -> Result[UserIdResult, UserError]:
        """Run the update use case.

        Args:
            command: User ID from the path plus new name and email.

        Returns:
            Ok echoing the user ID, or Err.
        """
        if not self._service.is_email_available(command.email):
            logger.info("Rejected update id=%s: email in use", command.user_id)
            return Err(self._errors.email_already_taken())

        success = self._service.update_user(command.user_id, command.name, command.email)
        if not success:
            return Err(self._errors.unprocessable_entity("Failed to update user"))

        return Ok(UserIdResult(id=command.user_id))
