"""LLM provider system — abstract base + concrete providers."""

from __future__ import annotations

from biminsight.exceptions import ConfigurationError
from biminsight.llm.providers.base import LLMProvider
from biminsight.llm.providers.gemini import GeminiProvider
from biminsight.llm.providers.ollama import OllamaProvider
from biminsight.settings import InsightSettings

__all__ = ["GeminiProvider", "LLMProvider", "OllamaProvider", "get_provider"]


def get_provider(settings: InsightSettings) -> LLMProvider:
    """Return the provider named by ``settings.provider``."""
    if settings.provider == "gemini":
        return GeminiProvider(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_api_url,
            model=settings.gemini_model,
            timeout=settings.timeout,
        )
    if settings.provider == "ollama":
        return OllamaProvider(
            base_url=settings.ollama_host,
            model=settings.ollama_model,
            timeout=settings.timeout,
        )
    raise ConfigurationError(f"Unknown provider: {settings.provider!r}")
