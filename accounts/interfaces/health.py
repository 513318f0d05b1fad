"""
Health check router.

Liveness endpoint for probes. Reports the API version and which user
store the process was configured with, without touching the store.
"""

from fastapi import APIRouter, Request

from accounts.core.config import settings
from accounts.interfaces.users.schemas import ErrorResponse, HealthResponse
from accounts.shared.security.rate_limiting import default_rate_limit, limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={429: {"model": ErrorResponse}},
    summary="Health check",
    description="Returns application health status, version and user store kind.",
)
@limiter.limit(default_rate_limit)
def health_check(request: Request) -> HealthResponse:
    store = "memory" if settings.use_in_memory_store else "sql"
    return HealthResponse(status="ok", version=settings.version, store=store)
