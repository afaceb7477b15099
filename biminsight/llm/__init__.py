"""Text-generation backends."""

from biminsight.llm.providers import GeminiProvider, LLMProvider, OllamaProvider, get_provider

__all__ = ["GeminiProvider", "LLMProvider", "OllamaProvider", "get_provider"]
