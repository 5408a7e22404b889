"""Application-wide FastAPI dependencies."""

import httpx
from fastapi import Request


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the HTTP client the AI gateway uses to reach Gemini.

    One client is opened in the ``main.lifespan`` hook and closed on
    shutdown, so AI requests reuse pooled connections.
    """
    return request.app.state.http_client
