"""Rate limiting middleware using slowapi."""
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from fastapi import Request
from fastapi.responses import JSONResponse

from app.config import settings


# Create limiter with IP-based key function
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri=None,  # Use in-memory storage (Redis can be added later)
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Render rate-limit failures in the standard error envelope."""
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": "Too many requests from this IP, please try again later.",
        },
    )


def setup_rate_limiting(app):
    """Configure rate limiting for the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
