"""
Pydantic schemas for users API request/response validation.

These schemas enforce input shape and define the API contract.
Password confirmation is deliberately not validated here: the
request handlers and the users service own that decision.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PASSWORD_MAX_LEN = 128


class CreateUserRequest(BaseModel):
    """Request schema for user registration.

    Attributes:
        name: Display name.
        email: Login email.
        password: Plain text password.
        cpass: Password confirmation.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(
        ..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN, description="Login email"
    )
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    cpass: str = Field(
        ..., max_length=PASSWORD_MAX_LEN, description="Password confirmation"
    )


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user's name and email."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a password.

    Attributes:
        oldpass: Current password.
        newpass: New password.
        copass: Confirmation of the new password.
    """

    oldpass: str = Field(..., max_length=PASSWORD_MAX_LEN)
    newpass: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    copass: str = Field(..., max_length=PASSWORD_MAX_LEN)


class UserResponse(BaseModel):
    """A user as exposed by the API. Never includes the password."""

    id: str
    name: str
    email: str


class CreateUserResponse(BaseModel):
    """Response schema echoing the registered name and email."""

    name: str
    email: str


class UserIdResponse(BaseModel):
    """Response schema echoing the affected user ID."""

    id: str


class MessageResponse(BaseModel):
    """Response schema carrying a confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    store: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
