"""
Use case: Delete a user account.

Input: DeleteUserCommand (user_id)
Output: Ok(UserIdResult)
Side effects: Removes the user through the service.
Failure cases: UNPROCESSABLE_ENTITY when the service reports failure.
"""

from accounts.application.users.dtos import DeleteUserCommand, UserIdResult
from accounts.domain.users.errors import ErrorFactory, UserError
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Err, Ok, Result


class DeleteUserUseCase:
    """Deletes one user by ID."""

    def __init__(self, service: UserServicePort, errors: ErrorFactory) -> None:
        self._service = service
        self._errors = errors

    def execute(self, command: DeleteUserCommand) -> Result[UserIdResult, UserError]:
        success = self._service.delete_user(command.user_id)
        if not success:
            return Err(self._errors.unprocessable_entity("Failed to delete user"))

        return Ok(UserIdResult(id=command.user_id))
