"""ConsoleDialog — terminal stand-in for the host's message box."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from biminsight.host.base import Dialog

logger = logging.getLogger(__name__)


class ConsoleDialog(Dialog):
    """Writes each dialog as a titled block to *stream* (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def show(self, title: str, body: str) -> None:
        logger.info("[Dialog] %s", title)
        stream = self._stream or sys.stdout
        rule = "=" * max(len(title), 20)
        stream.write(f"{rule}\n{title}\n{rule}\n{body}\n\n")
        stream.flush()
