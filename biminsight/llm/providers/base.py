"""Abstract LLM provider interface and the shared JSON POST helper."""

from __future__ import annotations

import abc
import json
import logging
import socket
import urllib.error
import urllib.request
from typing import Any

from biminsight.exceptions import (
    ProviderConnectionError,
    ProviderResponseError,
    ProviderTimeoutError,
)

logger = logging.getLogger(__name__)


class LLMProvider(abc.ABC):
    """Base class for text-generation backends.

    Implementations override :meth:`generate`, which returns the generated
    text or raises a :class:`~biminsight.exceptions.ProviderError` subclass.
    """

    label: str = "LLM"
    """Backend name shown to users in error messages."""

    @abc.abstractmethod
    def generate(self, prompt: str, system_instruction: str | None = None) -> str:
        """Send *prompt* to the backend and return the generated text."""

    @abc.abstractmethod
    def is_available(self) -> bool:
        """Return *True* if the provider is ready to serve requests."""


def _is_timeout(reason: object) -> bool:
    return isinstance(reason, (TimeoutError, socket.timeout))


def post_json(
    url: str,
    payload: dict[str, Any],
    *,
    timeout: float,
    log_url: str | None = None,
) -> dict[str, Any]:
    """POST *payload* as JSON to *url* and return the decoded JSON body.

    *log_url* is what gets logged in place of *url*, so credentials carried
    in the query string stay out of the logs.

    Raises
    ------
    ProviderTimeoutError
        The request or the body read exceeded *timeout*.
    ProviderConnectionError
        The host could not be reached.
    ProviderResponseError
        Non-success HTTP status, or a body that is not a JSON object.
    """
    shown = log_url or url
    req = urllib.request.Request(
        url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )

    logger.debug("Sending POST request to %s", shown)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            logger.debug("Received response. Status Code: %s", resp.status)
            raw = resp.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        detail = ""
        try:
            detail = exc.read().decode("utf-8", errors="replace")[:500]
        except OSError:
            pass
        logger.debug("HTTP %s from %s: %s", exc.code, shown, detail)
        raise ProviderResponseError(
            f"Response status code does not indicate success: {exc.code} ({exc.reason})",
            status=exc.code,
        ) from exc
    except urllib.error.URLError as exc:
        if _is_timeout(exc.reason):
            raise ProviderTimeoutError(f"Request to {shown} timed out") from exc
        raise ProviderConnectionError(str(exc.reason)) from exc
    except (TimeoutError, socket.timeout) as exc:
        raise ProviderTimeoutError(f"Request to {shown} timed out") from exc
    except OSError as exc:
        raise ProviderConnectionError(str(exc)) from exc

    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ProviderResponseError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise ProviderResponseError("Response JSON is not an object")
    return body
