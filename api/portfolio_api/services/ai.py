"""Gemini-backed portfolio assistant."""

import json
import logging
from typing import Any

import httpx

from portfolio_api.config import Settings, get_settings
from portfolio_api.errors import IntegrationError
from portfolio_api.models.ai_config import DEFAULT_SYSTEM_PROMPT, AiConfig

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I apologize, but I couldn't generate a response at this time. Please try again."
)

CHAT_GUIDELINES = """Guidelines for feedback:
- Be specific and actionable
- Highlight strengths first
- Suggest concrete improvements
- Consider current industry trends
- Keep responses conversational but professional
- Focus on practical advice"""


class GeminiClient:
    """Minimal async client for the Gemini generateContent endpoint."""

    def __init__(self, config: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = config.gemini_base_url.rstrip("/")
        self.timeout = config.gemini_timeout_seconds
        self._transport = transport

    def _url(self, model: str) -> str:
        if self.base_url.endswith("/v1beta"):
            return f"{self.base_url}/models/{model}:generateContent"
        return f"{self.base_url}/v1beta/models/{model}:generateContent"

    async def generate(self, prompt: str, model: str, api_key: str | None) -> str | None:
        """
        Send a single-turn prompt and return the first candidate's text.

        Returns None when the provider answers without any text. Raises
        IntegrationError on missing key, transport errors and non-200 responses.
        """
        if not api_key:
            raise IntegrationError("Gemini API key is not configured")

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self._url(model), params={"key": api_key}, json=payload
                )
        except httpx.HTTPError as exc:
            raise IntegrationError(f"Gemini request failed: {exc}") from exc

        if response.status_code != 200:
            raise IntegrationError(f"Gemini HTTP {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError as exc:
            raise IntegrationError("Gemini returned a non-JSON body") from exc
        if not isinstance(data, dict):
            raise IntegrationError("Gemini returned an unexpected payload")

        candidates = data.get("candidates") or []
        if not candidates:
            return None
        try:
            parts = ((candidates[0] or {}).get("content") or {}).get("parts") or []
            if not parts or "text" not in parts[0]:
                return None
            return str(parts[0]["text"])
        except (AttributeError, TypeError, KeyError) as exc:
            raise IntegrationError("Gemini returned an unexpected payload") from exc


class PortfolioAssistant:
    """Builds prompts from the stored assistant configuration and queries Gemini."""

    def __init__(self, config: Settings, client: GeminiClient | None = None):
        self.config = config
        self.client = client or GeminiClient(config)

    def _api_key(self, ai_config: AiConfig | None) -> str | None:
        if ai_config is not None and ai_config.api_key:
            return ai_config.api_key
        return self.config.gemini_api_key

    @staticmethod
    def build_chat_prompt(
        message: str, context: str | None, ai_config: AiConfig | None
    ) -> str:
        system_prompt = DEFAULT_SYSTEM_PROMPT
        if ai_config is not None and ai_config.system_prompt:
            system_prompt = ai_config.system_prompt
        return (
            f"{system_prompt}\n\n"
            f"Portfolio Context: {context or 'Professional software developer portfolio'}\n\n"
            f"{CHAT_GUIDELINES}\n\n"
            f"User Question: {message}"
        )

    async def chat(self, message: str, context: str | None, ai_config: AiConfig | None) -> str:
        prompt = self.build_chat_prompt(message, context, ai_config)
        reply = await self.client.generate(
            prompt, self.config.gemini_model, self._api_key(ai_config)
        )
        return reply or FALLBACK_REPLY

    async def analyze_section(
        self, section: str, content: Any, ai_config: AiConfig | None
    ) -> str:
        """Ask for a structured review of one portfolio section."""
        prompt = (
            f"Analyze this {section} section of a portfolio and provide specific feedback:\n\n"
            f"{json.dumps(content, indent=2, default=str)}\n\n"
            "Please provide:\n"
            "1. What's working well\n"
            "2. Areas for improvement\n"
            "3. Specific suggestions\n"
            "4. Industry best practices\n\n"
            "Keep the response concise but thorough."
        )
        reply = await self.client.generate(
            prompt, self.config.gemini_analysis_model, self._api_key(ai_config)
        )
        return reply or "Unable to analyze this section at the moment."


def get_assistant() -> PortfolioAssistant:
    """Dependency providing the portfolio assistant."""
    return PortfolioAssistant(get_settings())
