"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, users)
- Error handlers (centralized error-to-HTTP mapping)
- Security (headers middleware, rate limit exceeded handler)
- Logging configuration
- Database schema bootstrap

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from accounts.core.config import settings
from accounts.infrastructure.users.schema import init_schema
from accounts.interfaces.health import router as health_router
from accounts.interfaces.users.dependencies import get_db_engine
from accounts.interfaces.users.router import router as users_router
from accounts.shared.errors.handlers import register_error_handlers
from accounts.shared.logging import configure_logging
from accounts.shared.security.headers import SecurityHeadersMiddleware
from accounts.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the users table exists."""
    if settings.use_in_memory_store:
        logger.info("Using in-memory user store")
    else:
        init_schema(get_db_engine())
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.sql_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    return app


app = create_app()
