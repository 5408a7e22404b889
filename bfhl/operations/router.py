"""FastAPI router for the operations endpoint."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Request
from structlog import get_logger

from bfhl.config import get_settings
from bfhl.dependencies import get_http_client
from bfhl.exceptions import InvalidRequestError
from bfhl.ratelimit import rate_limit_dependency

from .dispatcher import dispatch, parse_operation
from .schemas import ProcessResponse


logger = get_logger(__name__)

router = APIRouter(tags=["operations"], dependencies=[Depends(rate_limit_dependency)])


@router.post("/process", response_model=ProcessResponse)
@router.post("/bfhl", response_model=ProcessResponse, include_in_schema=False)
async def process_operation(
    request: Request,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> ProcessResponse:
    """Run exactly one of: fibonacci, prime, lcm, hcf, AI.

    The body is decoded here rather than by FastAPI so that malformed JSON
    and the one-key rule produce the same envelope as every other error.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidRequestError("Invalid JSON in request body")

    operation = parse_operation(payload)
    result = await dispatch(operation, client)

    return ProcessResponse.success(get_settings().OFFICIAL_EMAIL, result)
