"""Tests for the ``python -m biminsight`` runner."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import ifcopenshell
import ifcopenshell.api
import pytest

from biminsight.__main__ import main
from biminsight.logging_config import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in ("BIMINSIGHT_PROVIDER", "GEMINI_API_KEY", "BIMINSIGHT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    yield
    # main() leaves a handler bound to the captured stderr
    root = logging.getLogger("biminsight")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture()
def model(tmp_path: Path) -> Path:
    f = ifcopenshell.file(schema="IFC4")
    ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcProject", name="CLI")
    ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcWall", name="W1")
    path = tmp_path / "model.ifc"
    f.write(str(path))
    return path


@pytest.fixture()
def empty_model(tmp_path: Path) -> Path:
    f = ifcopenshell.file(schema="IFC4")
    ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcProject", name="Empty")
    path = tmp_path / "empty.ifc"
    f.write(str(path))
    return path


def _urlopen_returning(text: str) -> MagicMock:
    resp = MagicMock()
    resp.status = 200
    resp.read.return_value = json.dumps(
        {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    ).encode("utf-8")
    cm = MagicMock()
    cm.__enter__.return_value = resp
    return MagicMock(return_value=cm)


class TestCli:
    def test_dry_run_prints_prompt(self, model: Path, tmp_path: Path, capsys) -> None:
        assert main([str(model), "--project", str(tmp_path), "--dry-run"]) == 0
        out = capsys.readouterr().out
        assert "As a BIM analyst" in out
        assert "N/A, 0.00 ft, 0.00 sq.ft, N/A" in out

    def test_dry_run_collection_error(self, model: Path, tmp_path: Path, capsys) -> None:
        with patch(
            "biminsight.host.ifc.IfcModelHost.collect_walls",
            side_effect=RuntimeError("model is locked"),
        ):
            code = main([str(model), "--project", str(tmp_path), "--dry-run"])

        assert code == 1
        captured = capsys.readouterr()
        assert "An error occurred: model is locked" in captured.out
        assert "Traceback" not in captured.err

    def test_dry_run_no_walls(self, empty_model: Path, tmp_path: Path, capsys) -> None:
        assert main([str(empty_model), "--project", str(tmp_path), "--dry-run"]) == 0
        assert capsys.readouterr().out == "No walls found in the model to analyze.\n"

    def test_no_walls(self, empty_model: Path, tmp_path: Path, capsys) -> None:
        assert main([str(empty_model), "--project", str(tmp_path)]) == 0
        assert "No walls found in the model to analyze." in capsys.readouterr().out

    def test_runs_against_gemini(self, model: Path, tmp_path: Path, capsys) -> None:
        (tmp_path / ".env").write_text("GEMINI_API_KEY=k\n", encoding="utf-8")
        urlopen = _urlopen_returning("One wall, nothing unusual.")
        with patch("biminsight.llm.providers.base.urllib.request.urlopen", urlopen):
            code = main([str(model), "--project", str(tmp_path)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Gemini Model Insight" in out
        assert "One wall, nothing unusual." in out

    def test_async_mode(self, model: Path, tmp_path: Path, capsys) -> None:
        (tmp_path / ".env").write_text("GEMINI_API_KEY=k\n", encoding="utf-8")
        urlopen = _urlopen_returning("Async answer.")
        with patch("biminsight.llm.providers.base.urllib.request.urlopen", urlopen):
            code = main([str(model), "--project", str(tmp_path), "--async"])

        assert code == 0
        assert "Async answer." in capsys.readouterr().out

    def test_missing_model_fails(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "nope.ifc"), "--project", str(tmp_path)]) == 1
        assert "An error occurred" in capsys.readouterr().out

    def test_bad_template_fails(self, model: Path, tmp_path: Path, capsys) -> None:
        (tmp_path / ".env").write_text(
            f"BIMINSIGHT_PROMPT_FILE={tmp_path / 'missing.txt'}\n", encoding="utf-8"
        )
        assert main([str(model), "--project", str(tmp_path)]) == 1
        assert "Cannot read template" in capsys.readouterr().out


class TestSetupLogging:
    def test_replaces_handler(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        setup_logging("DEBUG", stream=first)
        logger = setup_logging("warning", stream=second)

        ours = [h for h in logger.handlers if getattr(h, "_biminsight", False)]
        assert len(ours) == 1
        assert logger.level == logging.WARNING

        logging.getLogger("biminsight.test").warning("hello")
        assert "hello" in second.getvalue()
        assert first.getvalue() == ""

    def test_unknown_level_defaults_to_info(self) -> None:
        assert setup_logging("chatty").level == logging.INFO
