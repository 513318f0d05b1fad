"""
Use case: Change a user's password.

Input: ChangePasswordCommand (user_id, oldpass, newpass, copass)
Output: Ok(MessageResult)
Side effects: Stores a new password hash through the service.
Failure cases: GENERIC when the service refuses the change.
"""

import logging

from accounts.application.users.dtos import ChangePasswordCommand, MessageResult
from accounts.domain.users.errors import ErrorFactory, UserError
from accounts.domain.users.ports import UserServicePort
from accounts.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Password changed successfully"


class ChangePasswordUseCase:
    """Forwards a password change to the service.

    All validation (current password, confirmation) belongs to the
    service; this handler only interprets its boolean answer.
    """

    def __init__(self, service: UserServicePort, errors: ErrorFactory) -> None:
        self._service = service
        self._errors = errors

    def execute(self, command: ChangePasswordCommand) -> Result[MessageResult, UserError]:
        changed = self._service.change_password(
            command.user_id,
            command.oldpass,
            command.newpass,
            command.copass,
        )
        if not changed:
            return Err(self._errors.generic("Failed to change password"))

        logger.info("Password changed for id=%s", command.user_id)
        return Ok(MessageResult(message=SUCCESS_MESSAGE))
