"""
Unit tests for the AI gateway.

The Gemini SDK and ``requests`` are patched at module level; no network.
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from acebuddy.config import Settings
from acebuddy.errors import ConfigurationError, ParseError, TransportError
from acebuddy.prompts.builder import (
    build_answer_review_request,
    build_chat_prompt,
    build_study_plan_request,
)
from acebuddy.schemas.base import Country, ExamLevel, ModelTier, Subject
from acebuddy.schemas.chat import ImageInput
from acebuddy.utils import gemini_client
from acebuddy.utils.gemini_client import GeminiClient, OpenRouterClient, get_gemini_client, reset_client

PNG = ImageInput(data=b"fake-png", mime_type="image/png")


@pytest.fixture
def mock_genai():
    with patch("acebuddy.utils.gemini_client.genai") as genai, \
            patch("acebuddy.utils.gemini_client.GenerationConfig") as config:
        config.side_effect = lambda **kwargs: kwargs
        model = MagicMock()
        model.generate_content.return_value = MagicMock(text="Hello from Gemini")
        genai.GenerativeModel.return_value = model
        yield genai


@pytest.fixture
def client(mock_genai, settings):
    return GeminiClient(settings)


def review_request():
    return build_answer_review_request(
        "2 + 2?", "4", Subject.MATH, ExamLevel.PRIMARY, Country.UK
    )


class TestGeminiClient:
    """Tests for GeminiClient."""

    def test_missing_key_is_configuration_error(self, mock_genai) -> None:
        with pytest.raises(ConfigurationError):
            GeminiClient(Settings(google_api_key=None))
        mock_genai.configure.assert_not_called()

    def test_configures_sdk(self, client, mock_genai) -> None:
        mock_genai.configure.assert_called_once_with(api_key="fake-google-key")

    @pytest.mark.asyncio
    async def test_plain_text_uses_fast_model(self, client, mock_genai) -> None:
        text = await client.call(build_chat_prompt("What is 7 x 8?"))

        assert text == "Hello from Gemini"
        kwargs = mock_genai.GenerativeModel.call_args.kwargs
        assert kwargs["model_name"] == "fast-model"
        assert "response_schema" not in kwargs["generation_config"]
        mock_genai.GenerativeModel.return_value.generate_content.assert_called_once_with(
            ["What is 7 x 8?"]
        )

    @pytest.mark.asyncio
    async def test_image_uses_pro_model_with_image_first(self, client, mock_genai) -> None:
        await client.call(build_chat_prompt("Solve this", image=PNG))

        assert mock_genai.GenerativeModel.call_args.kwargs["model_name"] == "pro-model"
        parts = mock_genai.GenerativeModel.return_value.generate_content.call_args.args[0]
        assert parts[0] == {"mime_type": "image/png", "data": b"fake-png"}
        assert parts[1] == "Solve this"

    @pytest.mark.asyncio
    async def test_structured_attaches_schema_and_parses(self, client, mock_genai) -> None:
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.return_value = MagicMock(
            text=json.dumps({"correctAnswer": "4", "explanation": "ok", "isCorrect": True})
        )
        request = review_request()

        result = await client.call(request)

        assert result == {"correctAnswer": "4", "explanation": "ok", "isCorrect": True}
        kwargs = mock_genai.GenerativeModel.call_args.kwargs
        assert kwargs["model_name"] == "pro-model"
        assert kwargs["generation_config"]["response_mime_type"] == "application/json"
        assert kwargs["generation_config"]["response_schema"] == request.response_schema

    @pytest.mark.asyncio
    async def test_invalid_json_is_parse_error(self, client, mock_genai) -> None:
        mock_genai.GenerativeModel.return_value.generate_content.return_value = MagicMock(
            text="Sorry, I can't do that"
        )
        with pytest.raises(ParseError):
            await client.call(review_request())

    @pytest.mark.asyncio
    async def test_sdk_failure_is_transport_error(self, client, mock_genai) -> None:
        mock_genai.GenerativeModel.return_value.generate_content.side_effect = RuntimeError(
            "503 Service Unavailable\nTraceback details that should not leak"
        )

        with pytest.raises(TransportError) as exc_info:
            await client.call(
                build_study_plan_request(ExamLevel.GCSE, Subject.MATH, Country.UK),
                lead="Failed to generate study plan.",
            )

        message = exc_info.value.user_message
        assert message.startswith("Failed to generate study plan.")
        assert message.endswith("(503 Service Unavailable)")
        assert "Traceback" not in message

    @pytest.mark.asyncio
    async def test_no_retries(self, client, mock_genai) -> None:
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.side_effect = ConnectionError("network down")

        with pytest.raises(TransportError):
            await client.call(build_chat_prompt("hi"))
        assert model.generate_content.call_count == 1

    @pytest.mark.asyncio
    async def test_empty_text_returned_as_empty(self, client, mock_genai) -> None:
        mock_genai.GenerativeModel.return_value.generate_content.return_value = MagicMock(text=None)
        assert await client.call(build_chat_prompt("hi")) == ""

    @pytest.mark.asyncio
    async def test_usage_stats(self, client) -> None:
        await client.call(build_chat_prompt("hi"))
        await client.call(build_chat_prompt("look", image=PNG))
        stats = client.get_usage_stats()
        assert stats["calls"] == {ModelTier.FAST.value: 1, ModelTier.PRO.value: 1}
        assert stats["provider"] == "gemini"


# =============================================================================
# OPENROUTER
# =============================================================================

@pytest.fixture
def mock_requests():
    with patch("acebuddy.utils.gemini_client.requests") as mock_req:
        resp = MagicMock()
        resp.status_code = 200
        resp.json.return_value = {"choices": [{"message": {"content": "Success content"}}]}
        mock_req.post.return_value = resp
        yield mock_req


class TestOpenRouterClient:
    """Tests for OpenRouterClient."""

    def test_missing_key_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            OpenRouterClient(Settings(openrouter_api_key=None))

    @pytest.mark.asyncio
    async def test_text_call(self, mock_requests, settings) -> None:
        client = OpenRouterClient(settings)
        text = await client.call(build_chat_prompt("What is 7 x 8?"))

        assert text == "Success content"
        payload = mock_requests.post.call_args.kwargs["json"]
        assert payload["model"] == "google/gemini-2.0-flash-001"
        assert payload["temperature"] == 0.7
        assert payload["messages"][1]["content"] == "What is 7 x 8?"
        assert "response_format" not in payload

    @pytest.mark.asyncio
    async def test_image_sent_first_as_data_url(self, mock_requests, settings) -> None:
        client = OpenRouterClient(settings)
        await client.call(build_chat_prompt("Solve this", image=PNG))

        payload = mock_requests.post.call_args.kwargs["json"]
        content = payload["messages"][1]["content"]
        assert content[0]["type"] == "image_url"
        assert content[0]["image_url"]["url"].startswith("data:image/png;base64,")
        assert content[1] == {"type": "text", "text": "Solve this"}
        assert payload["model"] == "google/gemini-2.5-pro"

    @pytest.mark.asyncio
    async def test_structured_call_parses_json(self, mock_requests, settings) -> None:
        mock_requests.post.return_value.json.return_value = {
            "choices": [{"message": {"content": '{"correctAnswer": "4", "explanation": "ok", "isCorrect": true}'}}]
        }
        client = OpenRouterClient(settings)
        result = await client.call(review_request())

        assert result["isCorrect"] is True
        payload = mock_requests.post.call_args.kwargs["json"]
        assert payload["response_format"] == {"type": "json_object"}
        assert "correctAnswer" in payload["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_http_error_is_transport_error(self, mock_requests, settings) -> None:
        mock_requests.post.return_value.raise_for_status.side_effect = Exception("429 Too Many Requests")
        client = OpenRouterClient(settings)

        with pytest.raises(TransportError) as exc_info:
            await client.call(build_chat_prompt("hi"))
        assert "(429 Too Many Requests)" in exc_info.value.user_message
        assert mock_requests.post.call_count == 1


class TestClientFactory:
    """Tests for get_gemini_client."""

    def setup_method(self) -> None:
        reset_client()

    def teardown_method(self) -> None:
        reset_client()

    def test_selects_openrouter(self, mock_requests) -> None:
        with patch.object(gemini_client, "get_settings", return_value=Settings(
            ai_provider="openrouter", openrouter_api_key="k",
        )):
            assert isinstance(get_gemini_client(), OpenRouterClient)

    def test_selects_gemini_and_caches(self, mock_genai) -> None:
        with patch.object(gemini_client, "get_settings", return_value=Settings(google_api_key="k")):
            first = get_gemini_client()
            assert isinstance(first, GeminiClient)
            assert get_gemini_client() is first

    def test_missing_credential_surfaces(self, mock_genai) -> None:
        with patch.object(gemini_client, "get_settings", return_value=Settings()):
            with pytest.raises(ConfigurationError):
                get_gemini_client()
