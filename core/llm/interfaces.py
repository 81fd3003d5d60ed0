"""
LLM Provider Interface - Abstract base for AI service providers.

This module defines the interface for the external compatibility scorer
(OpenAI, Gemini, any OpenAI-compatible endpoint, etc.).
"""
from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    """
    Abstract Interface for AI Service Providers.

    Implementations make a single call (no retries) bounded by a timeout
    and raise on any failure; callers decide how to degrade.
    """

    @abstractmethod
    def generate_json(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Send a prompt and return the raw response text, expected to hold a JSON object.

        Args:
            prompt: User prompt
            system_prompt: Optional system instruction

        Raises:
            Exception: network errors, timeouts, empty responses
        """
        pass


class UnavailableLLMProvider(LLMProvider):
    """
    Stand-in for a provider that could not be built.

    Every call raises the construction error, so enriched scoring takes
    its fallback while basic scoring is unaffected.
    """

    def __init__(self, error: Exception):
        self.error = error

    def generate_json(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        raise self.error
