"""
OpenAI Service - LLM implementation using the OpenAI API.

Also works with any OpenAI-compatible endpoint (Ollama, vLLM) via base_url.
"""
from typing import Optional
import logging

from openai import OpenAI

from core.exceptions import ConfigurationError
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import TEAMMATE_MATCHING_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Requests JSON-object responses from the chat completions API. The
    client is configured without retries so a failed call surfaces
    immediately to the caller's fallback.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        timeout_seconds: float = 30.0
    ):
        if not api_key:
            raise ConfigurationError(
                "OpenAI API key is not set (llm.api_key or OPENAI_API_KEY)"
            )

        client_kwargs = {
            'api_key': api_key,
            'timeout': timeout_seconds,
            'max_retries': 0,
        }
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)
        self.model = model
        self.temperature = temperature

    def generate_json(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Single chat completion in JSON-object mode; returns the raw content."""
        messages = [
            {"role": "system", "content": system_prompt or TEAMMATE_MATCHING_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content
        if not content:
            raise ValueError(f"Empty response from {self.model}")

        logger.debug(f"{self.model} returned {len(content)} chars")
        return content
