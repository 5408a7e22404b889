"""Health check endpoint."""

from fastapi import APIRouter

from bfhl.config import get_settings
from bfhl.operations.schemas import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(is_success=True, official_email=get_settings().OFFICIAL_EMAIL)
