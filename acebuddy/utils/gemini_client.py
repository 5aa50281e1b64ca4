"""
AI Gateway

The single integration point with the generative AI service:
- Model tier selection (FAST for plain text, PRO for images, schemas,
  grading and plans)
- Structured output via response_mime_type + response_schema
- Uniform error translation (TransportError / ParseError)

Supported Providers (via AI_PROVIDER setting):
- "gemini"      (default): Google Gemini API
- "openrouter":  OpenRouter.ai chat completions

Each call is made exactly once. Failures are not retried and there is
no backoff.
"""

import asyncio
import json
import logging
from typing import Any

import google.generativeai as genai
import requests
from google.generativeai.types import GenerationConfig

from acebuddy.config import Settings, get_settings
from acebuddy.errors import ConfigurationError, TransportError
from acebuddy.prompts.builder import GatewayRequest
from acebuddy.schemas.base import ModelTier
from acebuddy.utils.model_router import ModelRouter, select_tier
from acebuddy.utils.validation import parse_json

logger = logging.getLogger(__name__)

DEFAULT_LEAD = "Failed to get AI response."

STRUCTURED_SYSTEM_PROMPT = (
    "You are a precise tutoring assistant. "
    "You MUST respond with valid JSON matching this schema:\n"
    "{schema}\n"
    "Respond ONLY with the JSON, no markdown fences, no extra text."
)

TEXT_SYSTEM_PROMPT = "You are a friendly, encouraging homework helper for school-age students."


def effective_tier(request: GatewayRequest) -> ModelTier:
    """Tier actually used for a request, whatever the caller asked for."""
    return select_tier(
        request.tier,
        multimodal=request.is_multimodal,
        structured=request.is_structured,
    )


class _UsageMixin:
    """Per-tier call counters shared by both providers."""

    provider_name = "unknown"

    def _init_usage(self) -> None:
        self._calls: dict[ModelTier, int] = {tier: 0 for tier in ModelTier}
        self._failures = 0

    def get_usage_stats(self) -> dict[str, Any]:
        """Get current usage statistics."""
        return {
            "calls": {tier.value: count for tier, count in self._calls.items()},
            "failures": self._failures,
            "provider": self.provider_name,
        }


# =============================================================================
# GEMINI BACKEND
# =============================================================================

class GeminiClient(_UsageMixin):
    """
    Gemini API client.

    Usage:
        client = GeminiClient()
        questions = await client.call(
            build_question_generation_request(...),
            lead="Failed to generate practice questions.",
        )
    """

    provider_name = "gemini"

    def __init__(
        self,
        settings: Settings | None = None,
        router: ModelRouter | None = None,
    ) -> None:
        """
        Configure the SDK with the API key.

        Raises:
            ConfigurationError: If no API key is configured
        """
        self._settings = settings or get_settings()
        if not self._settings.google_api_key:
            raise ConfigurationError(
                "AI service is not configured. Set GOOGLE_API_KEY and restart."
            )
        genai.configure(api_key=self._settings.google_api_key)
        self._router = router or ModelRouter(self._settings)
        self._init_usage()

    async def call(self, request: GatewayRequest, lead: str = DEFAULT_LEAD) -> Any:
        """
        Send one request.

        Returns:
            Raw text for free-text requests, the decoded JSON document when
            the request carries a response schema

        Raises:
            TransportError: If the service call fails
            ParseError: If structured output is not valid JSON
        """
        if request.is_structured:
            return await self.generate_structured(request, lead)
        return await self.generate_text(request, lead)

    async def generate_structured(self, request: GatewayRequest, lead: str = DEFAULT_LEAD) -> Any:
        config = GenerationConfig(
            temperature=0.4,
            response_mime_type="application/json",
            response_schema=request.response_schema,
        )
        text = await self._generate(request, config, lead)
        return parse_json(text)

    async def generate_text(self, request: GatewayRequest, lead: str = DEFAULT_LEAD) -> str:
        config = GenerationConfig(temperature=0.7)
        return await self._generate(request, config, lead)

    async def _generate(self, request: GatewayRequest, config: GenerationConfig, lead: str) -> str:
        tier = effective_tier(request)
        model_name = self._router.gemini_model(tier)
        logger.info(
            f"Gemini call: model={model_name} tier={tier.value} "
            f"multimodal={request.is_multimodal} structured={request.is_structured}"
        )

        try:
            model = genai.GenerativeModel(
                model_name=model_name,
                generation_config=config,
            )
            response = await asyncio.to_thread(model.generate_content, request.parts())
            text = response.text
        except Exception as e:
            self._failures += 1
            logger.error(f"Gemini call failed ({model_name}): {e}")
            raise TransportError(lead, e) from e

        self._calls[tier] += 1
        return text or ""


# =============================================================================
# OPENROUTER BACKEND
# =============================================================================

class OpenRouterClient(_UsageMixin):
    """
    OpenRouter.ai client, a drop-in alternative to Gemini.

    Speaks the OpenAI-compatible chat completions API with ``requests``.
    """

    provider_name = "openrouter"
    BASE_URL = "https://openrouter.ai/api/v1/chat/completions"
    REQUEST_TIMEOUT = 120

    def __init__(
        self,
        settings: Settings | None = None,
        router: ModelRouter | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        if not self._settings.openrouter_api_key:
            raise ConfigurationError(
                "OPENROUTER_API_KEY not set. "
                "Get a key at https://openrouter.ai/keys"
            )
        self._api_key = self._settings.openrouter_api_key
        self._router = router or ModelRouter(self._settings)
        self._init_usage()

    def _build_messages(self, request: GatewayRequest) -> list[dict[str, Any]]:
        if request.is_structured:
            system_msg = STRUCTURED_SYSTEM_PROMPT.format(
                schema=json.dumps(request.response_schema, indent=2)
            )
        else:
            system_msg = TEXT_SYSTEM_PROMPT

        if request.image is not None:
            content: Any = [
                {"type": "image_url", "image_url": {"url": request.image.to_data_url()}},
            ]
            if request.prompt:
                content.append({"type": "text", "text": request.prompt})
        else:
            content = request.prompt

        return [
            {"role": "system", "content": system_msg},
            {"role": "user", "content": content},
        ]

    def _call_api(self, payload: dict[str, Any]) -> str:
        """Make a synchronous HTTP call to OpenRouter."""
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        resp = requests.post(
            self.BASE_URL, headers=headers, json=payload, timeout=self.REQUEST_TIMEOUT
        )
        resp.raise_for_status()
        data = resp.json()
        return data["choices"][0]["message"]["content"] or ""

    async def call(self, request: GatewayRequest, lead: str = DEFAULT_LEAD) -> Any:
        tier = effective_tier(request)
        model_id = self._router.openrouter_model(tier)
        payload: dict[str, Any] = {
            "model": model_id,
            "messages": self._build_messages(request),
            "temperature": 0.4 if request.is_structured else 0.7,
        }
        if request.is_structured:
            payload["response_format"] = {"type": "json_object"}

        logger.info(f"OpenRouter call: model={model_id} tier={tier.value}")
        try:
            text = await asyncio.to_thread(self._call_api, payload)
        except Exception as e:
            self._failures += 1
            logger.error(f"OpenRouter call failed ({model_id}): {e}")
            raise TransportError(lead, e) from e

        self._calls[tier] += 1
        if request.is_structured:
            return parse_json(text)
        return text


# =============================================================================
# CLIENT FACTORY
# =============================================================================

AIClient = GeminiClient | OpenRouterClient

# Global client instance
_client: AIClient | None = None


def get_gemini_client() -> AIClient:
    """
    Get or create the global AI client.

    Selects provider based on the AI_PROVIDER setting:
    - "openrouter" → OpenRouterClient
    - "gemini" (default) → GeminiClient

    Raises:
        ConfigurationError: If the selected provider has no credential
    """
    global _client
    if _client is None:
        settings = get_settings()
        if settings.ai_provider == "openrouter":
            logger.info("Using OpenRouter AI provider")
            _client = OpenRouterClient(settings)
        else:
            logger.info("Using Gemini AI provider")
            _client = GeminiClient(settings)
    return _client


def reset_client() -> None:
    """Drop the global client (e.g. after configuration changes)."""
    global _client
    _client = None
