"""HTTP client for the single-word question answering endpoint (Gemini)."""

import asyncio
import re
import string
from typing import Any

import httpx
from structlog import get_logger

from bfhl.config import get_settings
from bfhl.exceptions import InvalidRequestError
from .exceptions import AIBackendTimeoutError, AIBackendUnavailableError, AIBackendError


logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a concise answer engine. Answer the following question in exactly one word. "
    "Only respond with a single word, nothing else. No punctuation, no explanation."
)

FALLBACK_ANSWER = "unknown"

_TAG_PATTERN = re.compile(r"<[^>]*>")


def sanitize_question(question: str | None, max_length: int = 500) -> str:
    """Strip markup-like tags from a question and enforce its length.

    Args:
        question: Raw question text from the request.
        max_length: Maximum allowed length after sanitization.

    Returns:
        The sanitized, trimmed question.

    Raises:
        InvalidRequestError: If the question is blank or too long.
    """
    if question is None or not question.strip():
        raise InvalidRequestError("AI question must not be empty")

    sanitized = _TAG_PATTERN.sub("", question).strip()
    if not sanitized:
        raise InvalidRequestError("AI question must not be empty")
    if len(sanitized) > max_length:
        raise InvalidRequestError(f"AI question must not exceed {max_length} characters")
    return sanitized


def build_request_body(question: str) -> dict[str, Any]:
    """Build the generateContent payload for a sanitized question."""
    return {
        "system_instruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        "contents": [{"parts": [{"text": question}]}],
        "generationConfig": {
            "temperature": 0.1,
            "maxOutputTokens": 10,
        },
    }


def extract_answer(payload: Any) -> str:
    """Pull a single-word answer out of a generateContent response.

    Takes the first text candidate, keeps its first whitespace-delimited
    token and strips trailing punctuation. Falls back to ``"unknown"`` when
    the response has no usable text.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_ANSWER

    if not isinstance(text, str) or not text.strip():
        return FALLBACK_ANSWER

    first_word = text.split()[0]
    stripped = first_word.rstrip(string.punctuation)
    return stripped or first_word


async def ask(
    client: httpx.AsyncClient,
    question: str,
    api_url: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
) -> str:
    """Ask the completion endpoint a question and return a one-word answer.

    Args:
        client: Shared HTTP client.
        question: The caller's question.
        api_url: Endpoint override (defaults to settings).
        api_key: Credential override (defaults to settings).
        timeout: Hard deadline in seconds (defaults to settings).

    Returns:
        A single-word answer, or ``"unknown"``.

    Raises:
        InvalidRequestError: If the question is blank or too long.
        AIBackendTimeoutError: If the endpoint misses the deadline.
        AIBackendUnavailableError: If the endpoint is unreachable or not configured.
        AIBackendError: If the endpoint returns an HTTP error status.
    """
    settings = get_settings()
    sanitized = sanitize_question(question, settings.AI_MAX_QUESTION_LENGTH)

    api_url = api_url or settings.GEMINI_API_URL
    api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
    timeout = timeout or settings.AI_TIMEOUT_SECONDS

    if not api_key:
        logger.error("ai_not_configured")
        raise AIBackendUnavailableError(reason="GEMINI_API_KEY is not set")

    try:
        response = await asyncio.wait_for(
            client.post(
                api_url,
                params={"key": api_key},
                json=build_request_body(sanitized),
                timeout=timeout,
            ),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.error("ai_timeout", timeout_seconds=timeout)
        raise AIBackendTimeoutError(timeout_seconds=timeout)
    except httpx.RequestError as e:
        logger.error("ai_unreachable", reason=type(e).__name__)
        raise AIBackendUnavailableError(reason=str(e))

    if response.status_code >= 400:
        logger.error("ai_backend_error", status_code=response.status_code)
        raise AIBackendError(status_code_received=response.status_code)

    try:
        data = response.json()
    except ValueError:
        logger.warning("ai_response_unparseable")
        return FALLBACK_ANSWER

    return extract_answer(data)
