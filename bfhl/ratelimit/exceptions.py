"""Rate limit exceptions."""

from bfhl.exceptions import BfhlError


class RateLimitExceededError(BfhlError):
    """Raised when a client has exhausted its request budget.

    Attributes:
        limit: The rate limit that was exceeded.
        retry_after: Seconds until request can be retried.
    """

    status_code = 429

    def __init__(self, limit: int, retry_after: float):
        super().__init__(
            message="Rate limit exceeded. Please try again later.",
            code="RATE_LIMIT_EXCEEDED"
        )
        self.limit = limit
        self.retry_after = retry_after
