"""Operations module - request parsing, dispatch and the math functions."""

from .schemas import (
    OperationRequest,
    FibonacciRequest,
    PrimeFilterRequest,
    LcmRequest,
    HcfRequest,
    AskAiRequest,
    ProcessResponse,
    HealthResponse,
)
from .dispatcher import parse_operation, dispatch
from .router import router


__all__ = [
    # Schemas
    "OperationRequest",
    "FibonacciRequest",
    "PrimeFilterRequest",
    "LcmRequest",
    "HcfRequest",
    "AskAiRequest",
    "ProcessResponse",
    "HealthResponse",
    # Dispatch
    "parse_operation",
    "dispatch",
    # Router
    "router",
]
