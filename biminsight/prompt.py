"""Prompt assembly for the wall-analysis request.

The prompt is an instructional preamble, a blank line, then one line per
wall in the form ``id, typeName, length ft, area sq.ft, levelName``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from biminsight.config import DEFAULT_PREAMBLE
from biminsight.exceptions import ConfigurationError
from biminsight.models.wall import WallRecord

logger = logging.getLogger(__name__)


def build_prompt(walls: Iterable[WallRecord], preamble: str = DEFAULT_PREAMBLE) -> str:
    """Return the full prompt text for *walls*."""
    lines = [preamble.rstrip("\n"), ""]
    lines.extend(wall.to_prompt_line() for wall in walls)
    return "\n".join(lines) + "\n"


def load_template(path: str | Path | None, default: str) -> str:
    """Return the text stored at *path*, or *default* when no path is set.

    Raises
    ------
    ConfigurationError
        If *path* is set but cannot be read or is empty.
    """
    if not path:
        return default
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read template {path}: {exc}") from exc
    if not text:
        raise ConfigurationError(f"Template {path} is empty")
    logger.debug("Loaded template from %s", path)
    return text
