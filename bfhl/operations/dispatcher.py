"""Request parsing and routing of operations.

``parse_operation`` turns a decoded JSON body into exactly one
``OperationRequest`` variant; ``dispatch`` runs it. Neither holds state, so
both are safe to call from concurrent requests.
"""

from typing import Any

import httpx
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from structlog import get_logger

from bfhl.ai import gateway
from bfhl.config import get_settings
from bfhl.exceptions import InvalidRequestError

from . import math_ops
from .schemas import (
    OPERATION_MODELS,
    OperationRequest,
    FibonacciRequest,
    PrimeFilterRequest,
    LcmRequest,
    HcfRequest,
    AskAiRequest,
)


logger = get_logger(__name__)

NO_KEY_MESSAGE = (
    "No functional key provided. Request must contain exactly one key: "
    + ", ".join(OPERATION_MODELS)
)


def _describe_validation_error(key: str, error: ValidationError) -> str:
    first = error.errors()[0]
    return f"Invalid value for '{key}': {first['msg']}"


def parse_operation(payload: Any) -> OperationRequest:
    """Build the single operation variant a request body describes.

    Keys whose value is ``null`` count as absent; unknown keys are ignored.

    Args:
        payload: Decoded JSON request body.

    Returns:
        The populated OperationRequest variant.

    Raises:
        InvalidRequestError: If the body is not an object, holds zero or
            several operation keys, or the value has the wrong type.
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    present = [key for key in OPERATION_MODELS if payload.get(key) is not None]

    if not present:
        raise InvalidRequestError(NO_KEY_MESSAGE)
    if len(present) > 1:
        raise InvalidRequestError(f"Exactly one key required, {len(present)} provided")

    key = present[0]
    try:
        operation = OPERATION_MODELS[key].model_validate({key: payload[key]})
    except ValidationError as e:
        raise InvalidRequestError(_describe_validation_error(key, e))

    if isinstance(operation, FibonacciRequest):
        max_terms = get_settings().FIBONACCI_MAX_TERMS
        if operation.n > max_terms:
            raise InvalidRequestError(f"Fibonacci input must not exceed {max_terms}")

    return operation


async def dispatch(operation: OperationRequest, client: httpx.AsyncClient) -> Any:
    """Run an operation and return its result.

    Math operations run in the threadpool so CPU work never blocks the
    event loop. Errors raised by the operation propagate unchanged.

    Args:
        operation: A parsed OperationRequest variant.
        client: Shared HTTP client used by the AI gateway.

    Returns:
        The operation's result (list of ints, int, or str).
    """
    if isinstance(operation, FibonacciRequest):
        logger.info("processing_operation", operation="fibonacci", n=operation.n)
        return await run_in_threadpool(math_ops.fibonacci, operation.n)
    if isinstance(operation, PrimeFilterRequest):
        logger.info("processing_operation", operation="prime", count=len(operation.values))
        return await run_in_threadpool(math_ops.filter_primes, operation.values)
    if isinstance(operation, LcmRequest):
        logger.info("processing_operation", operation="lcm", count=len(operation.values))
        return await run_in_threadpool(math_ops.compute_lcm, operation.values)
    if isinstance(operation, HcfRequest):
        logger.info("processing_operation", operation="hcf", count=len(operation.values))
        return await run_in_threadpool(math_ops.compute_hcf, operation.values)
    if isinstance(operation, AskAiRequest):
        logger.info("processing_operation", operation="AI")
        return await gateway.ask(client, operation.question)

    raise TypeError(f"Unsupported operation: {type(operation).__name__}")
