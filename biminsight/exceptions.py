"""Error hierarchy for the insight pipeline.

Providers raise these; :class:`~biminsight.insight.InsightService` turns them
into user-facing text and :class:`~biminsight.command.InsightCommand` turns
anything left over into an error dialog.
"""

from __future__ import annotations


class InsightError(Exception):
    """Base class for all biminsight errors."""


class ConfigurationError(InsightError):
    """Raised when settings are missing or cannot be parsed."""


class ProviderError(InsightError):
    """Raised when a text-generation backend call fails."""


class ProviderConnectionError(ProviderError):
    """The endpoint could not be reached (DNS, refused, proxy, TLS)."""


class ProviderTimeoutError(ProviderError):
    """The endpoint did not answer within the configured timeout."""


class ProviderResponseError(ProviderError):
    """The endpoint answered with a non-success status or an unusable body."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
