"""Logging setup for command-line and host runs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``biminsight`` logger.

    Calling this more than once replaces the handler instead of stacking
    duplicates, so hosts that reload the command do not double-log.
    """
    root = logging.getLogger("biminsight")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, "_biminsight", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._biminsight = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root
