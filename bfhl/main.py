import httpx
from fastapi import FastAPI
from contextlib import asynccontextmanager
from structlog import get_logger

from .config import get_settings
from .error_handlers import register_exception_handlers
from .health import router as health_router
from .logging_config import configure_logging
from .operations import router as operations_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("starting", app=settings.APP_NAME)

    # Shared HTTP client for the AI backend.
    # timeouts=None removes global default timeout, allowing per-request timeouts
    app.state.http_client = httpx.AsyncClient(timeout=None)

    yield

    await app.state.http_client.aclose()
    logger.info("stopped", app=settings.APP_NAME)

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

register_exception_handlers(app)

# Include routers
app.include_router(health_router)
app.include_router(operations_router)
