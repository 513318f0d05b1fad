"""
Centralized error translation for FastAPI.

``error_response`` is the single place where a UserError kind becomes
an HTTP status. ``register_error_handlers`` covers everything else:
unexpected exceptions raised by collaborators end up as a 500.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from accounts.domain.users.errors import ErrorKind, UserError

logger = logging.getLogger(__name__)

HTTP_403 = 403
HTTP_422 = 422
HTTP_500 = 500

# kind -> (status, wire code)
ERROR_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.UNPROCESSABLE_ENTITY: (HTTP_422, "UNPROCESSABLE_ENTITY_ERROR"),
    ErrorKind.EMAIL_ALREADY_TAKEN: (HTTP_422, "EMAIL_ALREADY_TAKEN_ERROR"),
    ErrorKind.INVALID_PASSWORD: (HTTP_403, "INVALID_PASSWORD_ERROR"),
    ErrorKind.GENERIC: (HTTP_500, "SERVER_ERROR"),
}


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def error_response(error: UserError) -> JSONResponse:
    """Translate a handler error descriptor into an HTTP response.

    Args:
        error: The descriptor returned by a use case.

    Returns:
        A JSON response whose status depends only on ``error.kind``.
    """
    status_code, code = ERROR_STATUS[error.kind]
    if status_code >= HTTP_500:
        logger.error("%s: %s", error.kind.value, error.message)
    else:
        logger.warning("%s: %s", error.kind.value, error.message)
    return _error_response(status_code, code, error.message)


def register_error_handlers(app: FastAPI) -> None:
    """Register the fallback exception handler on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
