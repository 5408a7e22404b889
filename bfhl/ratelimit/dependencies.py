"""Rate limiting FastAPI dependencies."""

from fastapi import Request, Response
from structlog import get_logger

from .limiter import get_rate_limiter, RateLimitResult
from .exceptions import RateLimitExceededError


logger = get_logger(__name__)


def resolve_client_ip(request: Request) -> str:
    """Resolve the real client IP, respecting common proxy headers.

    Order: first entry of ``X-Forwarded-For``, then ``X-Real-IP``, then the
    transport peer address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("X-Real-IP", "").strip()
    if real_ip:
        return real_ip

    if request.client is not None and request.client.host:
        return request.client.host
    return "unknown"


def add_rate_limit_headers(response: Response, result: RateLimitResult) -> None:
    """Add rate limit headers to response.

    Args:
        response: Response to add headers to.
        result: Rate limit check result.
    """
    response.headers["X-RateLimit-Limit"] = str(result.limit)
    response.headers["X-RateLimit-Remaining"] = str(result.remaining)
    response.headers["X-RateLimit-Reset"] = str(result.reset_at)


async def rate_limit_dependency(request: Request, response: Response) -> RateLimitResult:
    """FastAPI dependency that enforces per-client rate limiting.

    Runs before the endpoint body is read, so rejected requests never reach
    any operation.

    Returns:
        RateLimitResult for informational purposes.

    Raises:
        RateLimitExceededError: If the client's budget is exhausted.
    """
    client_ip = resolve_client_ip(request)
    result = get_rate_limiter().check(client_ip)

    if not result.allowed:
        logger.warning("rate_limit_exceeded", client_ip=client_ip, limit=result.limit)
        raise RateLimitExceededError(
            limit=result.limit,
            retry_after=result.retry_after
        )

    add_rate_limit_headers(response, result)
    request.state.rate_limit_result = result

    return result
