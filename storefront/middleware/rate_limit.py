"""Rate limiting using slowapi"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from storefront.core.config import settings

def get_rate_limit_key(request: Request) -> str:
    """Get rate limit key based on forwarded address or client IP"""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    else:
        ip = request.client.host if request.client else "unknown"

    return f"ip:{ip}"

# Create limiter instance
limiter = Limiter(
    key_func=get_rate_limit_key,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

async def custom_rate_limit_handler(request: Request, exc: RateLimitExceeded) -> Response:
    return JSONResponse(
        status_code=429,
        content={
            "detail": f"Too many requests. {exc.detail}",
            "error_code": "RATE_LIMIT_EXCEEDED",
        }
    )

# Shared limits for specific endpoint groups
auth_limiter = limiter.shared_limit(settings.RATE_LIMIT_AUTH, scope="auth")
search_limiter = limiter.shared_limit(settings.RATE_LIMIT_SEARCH, scope="search")
