"""Gemini provider — Google Generative Language ``generateContent`` API."""

from __future__ import annotations

import logging
import urllib.parse

from pydantic import ValidationError

from biminsight.config import DEFAULT_GEMINI_API_URL, DEFAULT_GEMINI_MODEL, DEFAULT_TIMEOUT
from biminsight.exceptions import ConfigurationError, ProviderResponseError
from biminsight.llm.providers.base import LLMProvider, post_json
from biminsight.models.gemini import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Provider that calls the Gemini REST endpoint.

    The API key travels as the ``key`` query parameter; it is never logged.
    """

    label = "Gemini"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_GEMINI_API_URL,
        model: str = DEFAULT_GEMINI_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"GeminiProvider(model={self.model!r}, base_url={self.base_url!r})"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"

    def is_available(self) -> bool:
        return bool(self.api_key)

    def generate(self, prompt: str, system_instruction: str | None = None) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "No Gemini API key configured. Set GEMINI_API_KEY in the "
                "environment or the project .env file."
            )

        url = f"{self.endpoint}?{urllib.parse.urlencode({'key': self.api_key})}"
        payload = GenerateContentRequest.from_prompt(prompt, system_instruction).to_payload()

        logger.info("Sending POST request to Gemini (%s)", self.model)
        body = post_json(url, payload, timeout=self.timeout, log_url=f"{self.endpoint}?key=***")

        try:
            return GenerateContentResponse.model_validate(body).first_text()
        except (ValidationError, LookupError) as exc:
            raise ProviderResponseError(f"Unexpected Gemini response: {exc}") from exc
