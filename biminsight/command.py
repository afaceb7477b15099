"""InsightCommand — collect walls, build the prompt, ask the model, show it.

Usage::

    from biminsight import ConsoleDialog, IfcModelHost, InsightCommand

    command = InsightCommand.from_project(".")
    result = command.execute(IfcModelHost("building.ifc"), ConsoleDialog())
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from biminsight.config import (
    DEFAULT_PREAMBLE,
    DEFAULT_SYSTEM_INSTRUCTION,
    NO_WALLS_MESSAGE,
    TITLE_ERROR,
    TITLE_NO_WALLS,
    TITLE_PROGRESS,
    TITLE_RESULT,
)
from biminsight.host.base import Dialog, ModelHost
from biminsight.insight import InsightService
from biminsight.llm.providers import get_provider
from biminsight.models.result import CommandResult, CommandStatus
from biminsight.prompt import build_prompt, load_template
from biminsight.settings import ConfigManager, InsightSettings

logger = logging.getLogger(__name__)

# Schedules a callable on the host's UI thread
Dispatcher = Callable[[Callable[[], None]], None]


def _call_now(fn: Callable[[], None]) -> None:
    fn()


class InsightCommand:
    """The wall-insight command.

    Parameters
    ----------
    service:
        Insight service used for the model call.
    preamble:
        Instructional text placed above the wall lines.
    """

    def __init__(self, service: InsightService, preamble: str = DEFAULT_PREAMBLE) -> None:
        self.service = service
        self.preamble = preamble

    @classmethod
    def from_settings(cls, settings: InsightSettings) -> InsightCommand:
        """Build a command from resolved settings (provider and templates)."""
        preamble = load_template(settings.prompt_file, DEFAULT_PREAMBLE)
        system = load_template(settings.system_file, DEFAULT_SYSTEM_INSTRUCTION)
        return cls(InsightService(get_provider(settings), system), preamble=preamble)

    @classmethod
    def from_project(cls, project_path: str | Path = ".") -> InsightCommand:
        """Build a command from the configuration found under *project_path*."""
        return cls.from_settings(ConfigManager().load_config(project_path))

    def _fail(self, dialog: Dialog, exc: BaseException) -> CommandResult:
        body = f"An error occurred: {exc}"
        try:
            dialog.show(TITLE_ERROR, body)
        except Exception:
            logger.error("Could not display error dialog", exc_info=True)
        return CommandResult(
            status=CommandStatus.FAILED, message=str(exc), title=TITLE_ERROR, body=body,
        )

    def prepare(self, host: ModelHost) -> str | None:
        """Collect walls from *host* and return the prompt, or *None* if there are none."""
        walls = host.collect_walls()
        if not walls:
            logger.info("No walls in %s", host.name)
            return None
        logger.info("Formatting %d walls from %s", len(walls), host.name)
        return build_prompt(walls, self.preamble)

    def execute(self, host: ModelHost, dialog: Dialog) -> CommandResult:
        """Run the command synchronously; never raises.

        Exactly one result dialog is shown: the insight, the no-walls notice,
        or an error.
        """
        try:
            prompt = self.prepare(host)
            if prompt is None:
                dialog.show(TITLE_NO_WALLS, NO_WALLS_MESSAGE)
                return CommandResult(title=TITLE_NO_WALLS, body=NO_WALLS_MESSAGE)

            insight = self.service.get_insight(prompt)
            dialog.show(TITLE_RESULT, insight)
            return CommandResult(title=TITLE_RESULT, body=insight)
        except Exception as exc:
            logger.exception("Insight command failed")
            return self._fail(dialog, exc)

    def execute_async(
        self,
        host: ModelHost,
        dialog: Dialog,
        on_complete: Callable[[CommandResult], None] | None = None,
        *,
        dispatch: Dispatcher | None = None,
    ) -> threading.Thread | None:
        """Run the model call on a background thread.

        Collection and formatting happen on the calling thread, since host
        model APIs are bound to it.  A progress notice is shown before the
        request starts; the result dialog is shown through *dispatch* so the
        host can marshal it back onto its UI thread.

        Returns the worker thread, or *None* when the command finished
        without a network call (no walls, or a collection error).
        """
        dispatch = dispatch or _call_now

        def finish(result: CommandResult) -> None:
            if on_complete is not None:
                on_complete(result)

        try:
            prompt = self.prepare(host)
            if prompt is None:
                dialog.show(TITLE_NO_WALLS, NO_WALLS_MESSAGE)
                finish(CommandResult(title=TITLE_NO_WALLS, body=NO_WALLS_MESSAGE))
                return None
            dialog.show(TITLE_PROGRESS, f"Requesting insight from {self.service.provider.label}...")
        except Exception as exc:
            logger.exception("Insight command failed")
            finish(self._fail(dialog, exc))
            return None

        def show_result(insight: str) -> None:
            try:
                dialog.show(TITLE_RESULT, insight)
                result = CommandResult(title=TITLE_RESULT, body=insight)
            except Exception as exc:
                logger.exception("Insight command failed")
                result = self._fail(dialog, exc)
            finish(result)

        def show_failure(exc: Exception) -> None:
            finish(self._fail(dialog, exc))

        def worker() -> None:
            try:
                insight = self.service.get_insight(prompt)
            except Exception as exc:
                logger.exception("Insight command failed")
                dispatch(lambda err=exc: show_failure(err))
                return
            dispatch(lambda: show_result(insight))

        thread = threading.Thread(target=worker, name="biminsight-request", daemon=True)
        thread.start()
        return thread
