"""Command-line runner: ``python -m biminsight MODEL.ifc``."""

from __future__ import annotations

import argparse
import logging
import sys

from biminsight.command import InsightCommand
from biminsight.config import NO_WALLS_MESSAGE, TITLE_ERROR
from biminsight.host.console import ConsoleDialog
from biminsight.host.ifc import IfcModelHost
from biminsight.logging_config import setup_logging
from biminsight.settings import ConfigManager

logger = logging.getLogger("biminsight.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biminsight",
        description="Summarise the walls of an IFC model with a generative-AI backend.",
    )
    parser.add_argument("model", help="Path to an IFC2x3 or IFC4 file")
    parser.add_argument(
        "--project", default=".",
        help="Directory holding .env / .biminsight/config.json (default: .)",
    )
    parser.add_argument(
        "--async", dest="run_async", action="store_true",
        help="Run the request on a background thread with a progress notice",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print the prompt without calling the backend",
    )
    parser.add_argument("--log-level", default=None, help="Override BIMINSIGHT_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    dialog = ConsoleDialog()

    try:
        settings = ConfigManager().load_config(args.project)
        setup_logging(args.log_level or settings.log_level)
        command = InsightCommand.from_settings(settings)
        host = IfcModelHost(args.model)
    except Exception as exc:
        dialog.show(TITLE_ERROR, f"An error occurred: {exc}")
        return 1

    if args.dry_run:
        try:
            prompt = command.prepare(host)
        except Exception as exc:
            dialog.show(TITLE_ERROR, f"An error occurred: {exc}")
            return 1
        sys.stdout.write(prompt or f"{NO_WALLS_MESSAGE}\n")
        return 0

    if args.run_async:
        results = []
        thread = command.execute_async(host, dialog, results.append)
        if thread is not None:
            thread.join()
        result = results[0]
    else:
        result = command.execute(host, dialog)

    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
