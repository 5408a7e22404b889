"""Exceptions raised by the AI gateway.

None of these carry the provider's response body in ``message``; callers
only ever see a generic description.
"""

from bfhl.exceptions import ServiceUnavailableError


class AIGatewayError(ServiceUnavailableError):
    """Base exception for AI backend failures."""
    pass


class AIBackendTimeoutError(AIGatewayError):
    """Raised when the completion endpoint doesn't respond in time.

    Attributes:
        timeout_seconds: Deadline that was exceeded.
    """

    def __init__(self, timeout_seconds: float):
        super().__init__(
            message="AI service is temporarily unavailable",
            code="AI_TIMEOUT"
        )
        self.timeout_seconds = timeout_seconds


class AIBackendUnavailableError(AIGatewayError):
    """Raised when the completion endpoint is unreachable or not configured.

    Attributes:
        reason: Description of the failure, for logs only.
    """

    def __init__(self, reason: str = "Connection failed"):
        super().__init__(
            message="AI service is temporarily unavailable",
            code="AI_UNAVAILABLE"
        )
        self.reason = reason


class AIBackendError(AIGatewayError):
    """Raised when the completion endpoint returns an error status.

    Attributes:
        status_code_received: HTTP status code from the provider.
    """

    def __init__(self, status_code_received: int):
        super().__init__(
            message=f"AI service returned an error: {status_code_received}",
            code="AI_BACKEND_ERROR"
        )
        self.status_code_received = status_code_received
