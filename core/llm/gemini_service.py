"""
Gemini Service - LLM implementation using the google-genai SDK.
"""
from typing import Optional
import logging

from google import genai
from google.genai import types

from core.exceptions import ConfigurationError
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import TEAMMATE_MATCHING_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class GeminiService(LLMProvider):
    """Gemini-backed scorer with JSON response mode and a request timeout."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.5-flash-lite",
        temperature: float = 0.2,
        timeout_seconds: float = 30.0
    ):
        if not api_key:
            raise ConfigurationError(
                "Gemini API key is not set (llm.api_key or GEMINI_API_KEY)"
            )

        # HttpOptions.timeout is in milliseconds
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )
        self.model = model
        self.temperature = temperature

    def generate_json(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt or TEAMMATE_MATCHING_SYSTEM_PROMPT,
                temperature=self.temperature,
                response_mime_type="application/json",
            ),
        )

        text = response.text or ""
        if not text.strip():
            raise ValueError(f"Empty response from {self.model}")

        logger.debug(f"{self.model} returned {len(text)} chars")
        return text
