"""InsightService — turn a prompt into displayable text, whatever happens.

Provider errors are recovered here into human-readable strings; nothing
raised by the backend reaches the caller.
"""

from __future__ import annotations

import logging

from biminsight.config import DEFAULT_SYSTEM_INSTRUCTION
from biminsight.exceptions import ProviderConnectionError, ProviderTimeoutError
from biminsight.llm.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class InsightService:
    """Wraps an :class:`LLMProvider` with the user-facing failure messages.

    Parameters
    ----------
    provider:
        Backend used for the request.
    system_instruction:
        Persona text sent alongside every prompt.
    """

    def __init__(
        self,
        provider: LLMProvider,
        system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION,
    ) -> None:
        self.provider = provider
        self.system_instruction = system_instruction

    def get_insight(self, prompt: str) -> str:
        """Return the generated insight, or a message describing the failure."""
        label = self.provider.label
        try:
            return self.provider.generate(prompt, self.system_instruction)
        except ProviderTimeoutError as exc:
            logger.warning("%s request timed out: %s", label, exc)
            return (
                f"The request to {label} timed out. "
                "This may be due to a slow or blocked connection."
            )
        except ProviderConnectionError as exc:
            logger.warning("%s connection failed: %s", label, exc)
            return (
                f"Failed to connect to {label}. Please check your internet "
                f"connection and proxy/firewall settings. Error: {exc}"
            )
        except Exception as exc:
            logger.warning("%s call failed", label, exc_info=True)
            return f"An unexpected error occurred when calling the {label} API. Error: {exc}"
