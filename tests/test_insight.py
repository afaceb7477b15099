"""Tests for InsightService — provider failures become readable text."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from biminsight.config import DEFAULT_SYSTEM_INSTRUCTION
from biminsight.exceptions import (
    ProviderConnectionError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from biminsight.insight import InsightService


@pytest.fixture
def provider() -> MagicMock:
    mock_provider = MagicMock()
    mock_provider.label = "Gemini"
    return mock_provider


class TestInsightService:
    def test_success_passthrough(self, provider: MagicMock) -> None:
        provider.generate.return_value = "X"
        assert InsightService(provider).get_insight("prompt") == "X"
        provider.generate.assert_called_once_with("prompt", DEFAULT_SYSTEM_INSTRUCTION)

    def test_custom_system_instruction(self, provider: MagicMock) -> None:
        provider.generate.return_value = "ok"
        InsightService(provider, system_instruction="Be brief.").get_insight("p")
        provider.generate.assert_called_once_with("p", "Be brief.")

    def test_connection_failure(self, provider: MagicMock) -> None:
        provider.generate.side_effect = ProviderConnectionError("Name or service not known")
        text = InsightService(provider).get_insight("prompt")
        assert text.startswith("Failed to connect to Gemini.")
        assert "check your internet connection and proxy/firewall settings" in text
        assert "Name or service not known" in text
        assert "Traceback" not in text

    def test_timeout(self, provider: MagicMock) -> None:
        provider.generate.side_effect = ProviderTimeoutError("slow")
        text = InsightService(provider).get_insight("prompt")
        assert text == (
            "The request to Gemini timed out. "
            "This may be due to a slow or blocked connection."
        )

    def test_timeout_and_connection_messages_differ(self, provider: MagicMock) -> None:
        service = InsightService(provider)
        provider.generate.side_effect = ProviderTimeoutError("t")
        timeout_text = service.get_insight("p")
        provider.generate.side_effect = ProviderConnectionError("c")
        connection_text = service.get_insight("p")
        assert "timed out" in timeout_text
        assert "timed out" not in connection_text

    def test_http_error(self, provider: MagicMock) -> None:
        provider.generate.side_effect = ProviderResponseError("status 500", status=500)
        text = InsightService(provider).get_insight("prompt")
        assert text == "An unexpected error occurred when calling the Gemini API. Error: status 500"

    def test_arbitrary_exception(self, provider: MagicMock) -> None:
        provider.generate.side_effect = ValueError("bad things")
        text = InsightService(provider).get_insight("prompt")
        assert "unexpected error" in text
        assert "bad things" in text

    def test_label_follows_provider(self, provider: MagicMock) -> None:
        provider.label = "Ollama"
        provider.generate.side_effect = ProviderTimeoutError("t")
        assert "request to Ollama timed out" in InsightService(provider).get_insight("p")
