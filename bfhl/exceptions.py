"""Custom exceptions for the BFHL API.

Every error carries the HTTP status the boundary responds with, so the
exception handlers never decide status codes on their own.
"""


class BfhlError(Exception):
    """Base exception for all BFHL API errors.

    Attributes:
        message: Human-readable message safe to return to the caller.
        code: Machine-readable error code.
    """

    status_code: int = 500

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InvalidRequestError(BfhlError):
    """Raised when the caller sent a request that cannot be processed."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_REQUEST")


class NotFoundError(BfhlError):
    """Raised when no route matches the requested path."""

    status_code = 404

    def __init__(self, message: str = "Endpoint not found"):
        super().__init__(message=message, code="NOT_FOUND")


class MethodNotAllowedError(BfhlError):
    """Raised when a route exists but not for the requested HTTP method.

    Attributes:
        method: The HTTP method that was rejected.
    """

    status_code = 405

    def __init__(self, method: str):
        super().__init__(
            message=f"HTTP method {method} is not supported for this endpoint",
            code="METHOD_NOT_ALLOWED"
        )
        self.method = method


class ServiceUnavailableError(BfhlError):
    """Raised when a downstream dependency cannot serve the request."""

    status_code = 503

    def __init__(self, message: str = "Service is temporarily unavailable", code: str | None = None):
        super().__init__(message=message, code=code or "SERVICE_UNAVAILABLE")


class InternalError(BfhlError):
    """Raised for failures that must not leak their cause to the caller."""

    status_code = 500

    def __init__(self, message: str = "An internal error occurred. Please try again later."):
        super().__init__(message=message, code="INTERNAL_ERROR")
