"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the users service and the service into use cases
via constructor injection. These are the composition root for
the users context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from accounts.application.users.change_password import ChangePasswordUseCase
from accounts.application.users.create_user import CreateUserUseCase
from accounts.application.users.delete_user import DeleteUserUseCase
from accounts.application.users.get_user import GetUserUseCase
from accounts.application.users.list_users import ListUsersUseCase
from accounts.application.users.service import UsersService
from accounts.application.users.update_user import UpdateUserUseCase
from accounts.core.config import settings
from accounts.domain.users.errors import ErrorFactory
from accounts.domain.users.ports import UserRepository, UserServicePort
from accounts.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from accounts.infrastructure.users.password_hasher import Pbkdf2PasswordHasher
from accounts.infrastructure.users.sql_user_repository import SqlUserRepository


@lru_cache
def get_db_engine() -> Engine:
    """Build a SQLAlchemy engine from application settings."""
    connect_args = {"check_same_thread": False} if settings.is_sqlite() else {}
    return create_engine(
        settings.database_url, pool_pre_ping=True, connect_args=connect_args
    )


@lru_cache
def get_users_service() -> UserServicePort:
    """Build the process-wide UsersService with its adapters."""
    repository: UserRepository
    if settings.use_in_memory_store:
        repository = InMemoryUserRepository()
    else:
        repository = SqlUserRepository(engine=get_db_engine())
    return UsersService(
        repository=repository,
        hasher=Pbkdf2PasswordHasher(iterations=settings.password_hash_iterations),
    )


def get_error_factory() -> ErrorFactory:
    """Return the error factory handed to every use case."""
    return ErrorFactory()


def get_list_users_use_case(
    service: UserServicePort = Depends(get_users_service),
) -> ListUsersUseCase:
    return ListUsersUseCase(service=service)


def get_user_use_case(
    service: UserServicePort = Depends(get_users_service),
    errors: ErrorFactory = Depends(get_error_factory),
) -> GetUserUseCase:
    return GetUserUseCase(service=service, errors=errors)


def get_create_user_use_case(
    service: UserServicePort = Depends(get_users_service),
    errors: ErrorFactory = Depends(get_error_factory),
) -> CreateUserUseCase:
    return CreateUserUseCase(service=service, errors=errors)


def get_update_user_use_case(
    service: UserServicePort = Depends(get_users_service),
    errors: ErrorFactory = Depends(get_error_factory),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(service=service, errors=errors)


def get_delete_user_use_case(
    service: UserServicePort = Depends(get_users_service),
    errors: ErrorFactory = Depends(get_error_factory),
) -> DeleteUserUseCase:
    return DeleteUserUseCase(service=service, errors=errors)


def get_change_password_use_case(
    service: UserServicePort = Depends(get_users_service),
    errors: ErrorFactory = Depends(get_error_factory),
) -> ChangePasswordUseCase:
    return ChangePasswordUseCase(service=service, errors=errors)
