"""Rate limiting module - Token bucket implementation."""

from .limiter import (
    RateLimitConfig,
    RateLimitResult,
    TokenBucket,
    RateLimiter,
    get_rate_limiter,
    reset_rate_limiter,
)
from .exceptions import RateLimitExceededError
from .dependencies import rate_limit_dependency, resolve_client_ip


__all__ = [
    "RateLimitConfig",
    "RateLimitResult",
    "TokenBucket",
    "RateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
    "RateLimitExceededError",
    "rate_limit_dependency",
    "resolve_client_ip",
]
