"""Token bucket rate limiter with in-memory, TTL-bounded storage."""

import time
import threading
from typing import Callable, NamedTuple

from cachetools import TTLCache
from pydantic import BaseModel, Field

from bfhl.config import get_settings


class RateLimitConfig(BaseModel):
    """Configuration for rate limiting.

    Attributes:
        requests_per_minute: Bucket capacity, restored once per window.
        window_seconds: Length of the refill window.
        idle_ttl_seconds: How long an unused bucket is kept before eviction.
        max_clients: Upper bound on the number of tracked clients.
    """

    requests_per_minute: int = Field(default=60, ge=1, description="Requests per window")
    window_seconds: float = Field(default=60.0, gt=0, description="Refill window in seconds")
    idle_ttl_seconds: float = Field(default=600.0, gt=0, description="Idle bucket eviction")
    max_clients: int = Field(default=10_000, ge=1, description="Max tracked clients")


class RateLimitResult(NamedTuple):
    """Result of a rate limit check.

    Attributes:
        allowed: Whether the request is allowed.
        limit: The rate limit.
        remaining: Remaining requests in window.
        reset_at: Unix timestamp when the window refills.
        retry_after: Seconds to wait if denied (0 if allowed).
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    retry_after: float = 0.0


class TokenBucket:
    """Thread-safe token bucket refilled to capacity once per window.

    Each request consumes one token. When the bucket is empty, requests are
    denied until the current window has elapsed.
    """

    def __init__(self, config: RateLimitConfig, clock: Callable[[], float] = time.monotonic):
        """Initialize token bucket.

        Args:
            config: Rate limit configuration.
            clock: Monotonic time source.
        """
        self.config = config
        self.tokens = config.requests_per_minute
        self._clock = clock
        self.last_refill = clock()
        self._lock = threading.Lock()

    def _refill(self) -> None:
        now = self._clock()
        if now - self.last_refill >= self.config.window_seconds:
            self.tokens = self.config.requests_per_minute
            self.last_refill = now

    def consume(self) -> RateLimitResult:
        """Try to take one token from the bucket.

        Returns:
            RateLimitResult with allow/deny status and metadata.
        """
        with self._lock:
            self._refill()

            window_left = max(0.0, self.last_refill + self.config.window_seconds - self._clock())
            reset_at = int(time.time() + window_left)

            if self.tokens > 0:
                self.tokens -= 1
                return RateLimitResult(
                    allowed=True,
                    limit=self.config.requests_per_minute,
                    remaining=self.tokens,
                    reset_at=reset_at,
                )

            return RateLimitResult(
                allowed=False,
                limit=self.config.requests_per_minute,
                remaining=0,
                reset_at=reset_at,
                retry_after=window_left,
            )


class RateLimiter:
    """Multi-key rate limiter using token buckets.

    Buckets are kept in a TTL cache and re-inserted on every access, so a
    bucket expires only after ``idle_ttl_seconds`` without requests. A request
    that already holds a bucket keeps using it even if the cache drops it.
    """

    def __init__(
        self,
        config: RateLimitConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize rate limiter.

        Args:
            config: Rate limit config. Uses defaults if not provided.
            clock: Monotonic time source shared by the cache and the buckets.
        """
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._buckets: TTLCache[str, TokenBucket] = TTLCache(
            maxsize=self.config.max_clients,
            ttl=self.config.idle_ttl_seconds,
            timer=clock,
        )
        self._lock = threading.Lock()

    def _get_bucket(self, key: str) -> TokenBucket:
        with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = TokenBucket(self.config, clock=self._clock)
            # Re-inserting resets the entry's TTL (expire-after-access)
            self._buckets[key] = bucket
            return bucket

    def check(self, key: str) -> RateLimitResult:
        """Consume one request from the budget of ``key``.

        Args:
            key: Rate limit key (the resolved client IP).

        Returns:
            RateLimitResult with status and headers.
        """
        return self._get_bucket(key).consume()

    def admit(self, key: str) -> bool:
        """Return True if a request from ``key`` may proceed."""
        return self.check(key).allowed

    def __len__(self) -> int:
        with self._lock:
            self._buckets.expire()
            return len(self._buckets)


# Global rate limiter instance
_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    """Get the global rate limiter instance, built from settings."""
    global _rate_limiter
    if _rate_limiter is None:
        settings = get_settings()
        _rate_limiter = RateLimiter(RateLimitConfig(
            requests_per_minute=settings.RATE_LIMIT_REQUESTS_PER_MINUTE,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
            idle_ttl_seconds=settings.RATE_LIMIT_IDLE_TTL_SECONDS,
            max_clients=settings.RATE_LIMIT_MAX_CLIENTS,
        ))
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Drop the global limiter so the next request builds a fresh one."""
    global _rate_limiter
    _rate_limiter = None
