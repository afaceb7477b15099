"""Ollama/local LLM provider."""

from __future__ import annotations

import json
import logging
import urllib.request

from biminsight.config import DEFAULT_OLLAMA_HOST, DEFAULT_OLLAMA_MODEL, DEFAULT_TIMEOUT, NO_INSIGHT_MESSAGE
from biminsight.llm.providers.base import LLMProvider, post_json

logger = logging.getLogger(__name__)

# Seconds allowed for the reachability check
_PROBE_TIMEOUT = 2.0


class OllamaProvider(LLMProvider):
    """Provider that calls a local Ollama instance."""

    label = "Ollama"

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_OLLAMA_HOST,
        model: str = DEFAULT_OLLAMA_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    def is_available(self) -> bool:
        """Return *True* when the server answers its version endpoint."""
        url = f"{self.base_url}/api/version"
        try:
            with urllib.request.urlopen(url, timeout=_PROBE_TIMEOUT) as resp:
                body = json.loads(resp.read().decode("utf-8"))
        except (OSError, ValueError):
            logger.debug("Ollama not reachable at %s", self.base_url)
            return False
        return isinstance(body, dict) and "version" in body

    def generate(self, prompt: str, system_instruction: str | None = None) -> str:
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": 0.3,
                "top_p": 0.9,
            },
        }
        if system_instruction:
            payload["system"] = system_instruction

        logger.info("Sending POST request to Ollama (%s)", self.model)
        body = post_json(f"{self.base_url}/api/generate", payload, timeout=self.timeout)
        return body.get("response") or NO_INSIGHT_MESSAGE
