"""AI module - single-word question answering via an external model."""

from .exceptions import (
    AIGatewayError,
    AIBackendTimeoutError,
    AIBackendUnavailableError,
    AIBackendError,
)
from .gateway import ask, sanitize_question, extract_answer, FALLBACK_ANSWER


__all__ = [
    # Exceptions
    "AIGatewayError",
    "AIBackendTimeoutError",
    "AIBackendUnavailableError",
    "AIBackendError",
    # Gateway
    "ask",
    "sanitize_question",
    "extract_answer",
    "FALLBACK_ANSWER",
]
