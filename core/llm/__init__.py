"""LLM Module - external compatibility scorer providers and interfaces."""
from core.llm.interfaces import LLMProvider, UnavailableLLMProvider
from core.llm.openai_service import OpenAIService
from core.llm.gemini_service import GeminiService

__all__ = ['LLMProvider', 'UnavailableLLMProvider', 'OpenAIService', 'GeminiService']
