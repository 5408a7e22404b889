"""Unit tests for the AI gateway."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock
import httpx

from bfhl.ai.gateway import (
    ask,
    build_request_body,
    extract_answer,
    sanitize_question,
    FALLBACK_ANSWER,
    SYSTEM_PROMPT,
)
from bfhl.ai.exceptions import (
    AIBackendTimeoutError,
    AIBackendUnavailableError,
    AIBackendError,
)
from bfhl.exceptions import InvalidRequestError, ServiceUnavailableError


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def mock_response(status_code: int = 200, payload: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestSanitizeQuestion:
    """Tests for question sanitization."""

    @pytest.mark.parametrize("question", ["", "   ", "\n\t", None])
    def test_blank_rejected(self, question):
        with pytest.raises(InvalidRequestError):
            sanitize_question(question)

    def test_tags_stripped_and_trimmed(self):
        question = "  <script>alert(1)</script>What is the capital of <b>France</b>?  "

        assert sanitize_question(question) == "alert(1)What is the capital of France?"

    def test_only_tags_rejected(self):
        with pytest.raises(InvalidRequestError):
            sanitize_question("<p></p>")

    def test_length_checked_after_stripping(self):
        padded = "<" + "x" * 600 + ">" + "q" * 500

        assert sanitize_question(padded) == "q" * 500

    def test_too_long_rejected(self):
        with pytest.raises(InvalidRequestError) as exc_info:
            sanitize_question("q" * 501)

        assert "500" in exc_info.value.message


class TestExtractAnswer:
    """Tests for parsing the one-word answer."""

    def test_single_word(self):
        assert extract_answer(gemini_payload("Paris")) == "Paris"

    def test_first_word_with_trailing_punctuation(self):
        assert extract_answer(gemini_payload("Paris. It is in France.")) == "Paris"

    def test_repeated_punctuation_stripped(self):
        assert extract_answer(gemini_payload("Yes!!")) == "Yes"

    @pytest.mark.parametrize("text, expected", [
        ("Paris)", "Paris"),
        ("Paris).", "Paris"),
        ("Delhi'", "Delhi"),
        ("Tokyo\"!", "Tokyo"),
        ("(Rome)", "(Rome"),
    ])
    def test_trailing_closers_stripped(self, text, expected):
        """Closing brackets and quotes count as trailing punctuation; leading ones stay."""
        assert extract_answer(gemini_payload(text)) == expected

    def test_leading_whitespace(self):
        assert extract_answer(gemini_payload("\n  Mumbai\n")) == "Mumbai"

    def test_punctuation_only_word_kept(self):
        assert extract_answer(gemini_payload("?! maybe")) == "?!"

    @pytest.mark.parametrize("payload", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {}}]},
        gemini_payload(""),
        gemini_payload("   "),
        None,
    ])
    def test_fallback(self, payload):
        assert extract_answer(payload) == FALLBACK_ANSWER


class TestAsk:
    """Tests for the outbound call."""

    @pytest.mark.asyncio
    async def test_success(self):
        mock_client = AsyncMock()
        mock_client.post.return_value = mock_response(payload=gemini_payload("Delhi"))

        answer = await ask(mock_client, "What is the capital of <i>India</i>?")

        assert answer == "Delhi"
        args, kwargs = mock_client.post.call_args
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["json"] == build_request_body("What is the capital of India?")
        assert kwargs["json"]["system_instruction"]["parts"][0]["text"] == SYSTEM_PROMPT
        assert kwargs["json"]["generationConfig"] == {"temperature": 0.1, "maxOutputTokens": 10}

    @pytest.mark.asyncio
    async def test_empty_question_never_calls_backend(self):
        mock_client = AsyncMock()

        with pytest.raises(InvalidRequestError):
            await ask(mock_client, "")

        mock_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_too_long_question_never_calls_backend(self):
        mock_client = AsyncMock()

        with pytest.raises(InvalidRequestError):
            await ask(mock_client, "<b>" + "x" * 501 + "</b>")

        mock_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_httpx_timeout_is_service_unavailable(self):
        mock_client = AsyncMock()
        mock_client.post.side_effect = httpx.TimeoutException("timeout")

        with pytest.raises(AIBackendTimeoutError) as exc_info:
            await ask(mock_client, "question", timeout=5.0)

        assert isinstance(exc_info.value, ServiceUnavailableError)
        assert exc_info.value.status_code == 503
        assert exc_info.value.timeout_seconds == 5.0

    @pytest.mark.asyncio
    async def test_hard_deadline(self):
        """A backend that never answers is cut off at the deadline."""
        async def hang(*args, **kwargs):
            await asyncio.sleep(10)

        mock_client = AsyncMock()
        mock_client.post.side_effect = hang

        with pytest.raises(AIBackendTimeoutError):
            await ask(mock_client, "question", timeout=0.05)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        mock_client = AsyncMock()
        mock_client.post.side_effect = httpx.ConnectError("refused")

        with pytest.raises(AIBackendUnavailableError):
            await ask(mock_client, "question")

    @pytest.mark.asyncio
    async def test_error_status_hides_provider_body(self):
        mock_client = AsyncMock()
        response = mock_response(status_code=403)
        response.text = '{"error": {"message": "API key invalid: secret-details"}}'
        mock_client.post.return_value = response

        with pytest.raises(AIBackendError) as exc_info:
            await ask(mock_client, "question")

        assert "secret-details" not in exc_info.value.message
        assert exc_info.value.status_code == 503
        assert exc_info.value.status_code_received == 403

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        mock_client = AsyncMock()

        with pytest.raises(AIBackendUnavailableError):
            await ask(mock_client, "question", api_key="")

        mock_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_unparseable_body_falls_back(self):
        mock_client = AsyncMock()
        response = mock_response()
        response.json.side_effect = ValueError("not json")
        mock_client.post.return_value = response

        assert await ask(mock_client, "question") == FALLBACK_ANSWER
