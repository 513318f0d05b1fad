"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on every route. Routes
opt in with ``@limiter.limit(default_rate_limit)``; the limit string is
read from settings on each request.
Protects the account endpoints against brute force and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from accounts.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def default_rate_limit() -> str:
    """Return the configured default limit, e.g. ``"60/minute"``."""
    return settings.rate_limit_default


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
