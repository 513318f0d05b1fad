"""
Use case: Register a new user account.

Input: CreateUserCommand (name, email, password, cpass)
Output: Ok(CreatedUserResult)
Side effects: Persists a user through the service.
Failure cases: EMAIL_ALREADY_TAKEN, INVALID_PASSWORD, UNPROCESSABLE_ENTITY.
"""

import logging

from accounts.application.users.dtos import CreatedUserResult, CreateUserCommand
from accounts.domain.users.errors import ErrorFactory, UserError
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Orchestrates user registration.

    Checks run in a fixed order: email availability, then password
    confirmation. The service is only asked to create the user once
    both pass.
    """

    def __init__(self, service: UserServicePort, errors: ErrorFactory) -> None:
        self._service = service
        self._errors = errors

    def execute(self, command: CreateUserCommand) -> Result[CreatedUserResult, UserError]:
        """Run the registration use case.

        Args:
            command: Registration fields from the request body.

        Returns:
            Ok echoing name and email, or Err describing the first
            failed check.
        """
        if not self._service.is_email_available(command.email):
            return Err(self._errors.email_already_taken())

        if command.cpass != command.password:
            return Err(self._errors.invalid_password())

        success = self._service.create_user(command.name, command.email, command.password)
        if not success:
            return Err(self._errors.unprocessable_entity("Failed to create user"))

        logger.info("Registered user name=%s", command.name)
        return Ok(CreatedUserResult(name=command.name, email=command.email))
