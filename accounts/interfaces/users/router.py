"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Input shape is validated by Pydantic schemas. A use case Err is
handed to ``error_response``, which alone decides the HTTP status;
successful calls always answer 200. Every route carries the default
rate limit; slowapi needs the raw ``request`` parameter for that.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from accounts.application.users.change_password import ChangePasswordUseCase
from accounts.application.users.create_user import CreateUserUseCase
from accounts.application.users.delete_user import DeleteUserUseCase
from accounts.application.users.dtos import (
    ChangePasswordCommand,
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UpdateUserCommand,
)
from accounts.application.users.get_user import GetUserUseCase
from accounts.application.users.list_users import ListUsersUseCase
from accounts.application.users.update_user import UpdateUserUseCase
from accounts.interfaces.users.dependencies import (
    get_change_password_use_case,
    get_create_user_use_case,
    get_delete_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
    get_user_use_case,
)
from accounts.interfaces.users.schemas import (
    ChangePasswordRequest,
    CreateUserRequest,
    CreateUserResponse,
    ErrorResponse,
    MessageResponse,
    UpdateUserRequest,
    UserIdResponse,
    UserResponse,
)
from accounts.shared.errors.handlers import error_response
from accounts.shared.result import Err
from accounts.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(prefix="/users", tags=["users"])

ERROR_RESPONSES = {
    403: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=list[UserResponse],
    responses={429: {"model": ErrorResponse}},
    summary="List users",
    description="Return every registered user.",
)
@limiter.limit(default_rate_limit)
def list_users(
    request: Request,
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """List all users."""
    result = use_case.execute()
    return [UserResponse(id=u.id, name=u.name, email=u.email) for u in result.value]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=ERROR_RESPONSES,
    summary="Get user",
    description="Return a single user by ID.",
)
@limiter.limit(default_rate_limit)
def get_user(
    request: Request,
    user_id: str,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse | JSONResponse:
    """Fetch one user."""
    result = use_case.execute(GetUserQuery(user_id=user_id))
    if isinstance(result, Err):
        return error_response(result.error)
    user = result.value
    return UserResponse(id=user.id, name=user.name, email=user.email)


@router.post(
    "",
    response_model=CreateUserResponse,
    responses=ERROR_RESPONSES,
    summary="Create user",
    description="Register a user after checking email availability and password confirmation.",
)
@limiter.limit(default_rate_limit)
def create_user(
    request: Request,
    payload: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> CreateUserResponse | JSONResponse:
    """Register a new user."""
    command = CreateUserCommand(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        cpass=payload.cpass,
    )
    result = use_case.execute(command)
    if isinstance(result, Err):
        return error_response(result.error)
    return CreateUserResponse(name=result.value.name, email=result.value.email)


@router.put(
    "/{user_id}",
    response_model=UserIdResponse,
    responses=ERROR_RESPONSES,
    summary="Update user",
    description="Change a user's name and email.",
)
@limiter.limit(default_rate_limit)
def update_user(
    request: Request,
    user_id: str,
    payload: UpdateUserRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserIdResponse | JSONResponse:
    """Update a user's profile fields."""
    command = UpdateUserCommand(user_id=user_id, name=payload.name, email=payload.email)
    result = use_case.execute(command)
    if isinstance(result, Err):
        return error_response(result.error)
    return UserIdResponse(id=result.value.id)


@router.delete(
    "/{user_id}",
    response_model=UserIdResponse,
    responses=ERROR_RESPONSES,
    summary="Delete user",
    description="Delete a user by ID.",
)
@limiter.limit(default_rate_limit)
def delete_user(
    request: Request,
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> UserIdResponse | JSONResponse:
    """Delete a user."""
    result = use_case.execute(DeleteUserCommand(user_id=user_id))
    if isinstance(result, Err):
        return error_response(result.error)
    return UserIdResponse(id=result.value.id)


@router.post(
    "/{user_id}/change-password",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Change password",
    description="Replace a user's password. Validation is performed by the users service.",
)
@limiter.limit(default_rate_limit)
def change_password(
    request: Request,
    user_id: str,
    payload: ChangePasswordRequest,
    use_case: ChangePasswordUseCase = Depends(get_change_password_use_case),
) -> MessageResponse | JSONResponse:
    """Change a user's password."""
    command = ChangePasswordCommand(
        user_id=user_id,
        oldpass=payload.oldpass,
        newpass=payload.newpass,
        copass=payload.copass,
    )
    result = use_case.execute(command)
    if isinstance(result, Err):
        return error_response(result.error)
    return MessageResponse(message=result.value.message)
