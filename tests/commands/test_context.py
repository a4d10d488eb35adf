"""Tests for AppContext result emission."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from quickstand.commands._context import AppContext
from quickstand.config.settings import QuickstandSettings
from quickstand.services.result import ServiceError, ServiceResult


def _app(tmp_path: Path, **flags: bool) -> AppContext:
    return AppContext(QuickstandSettings.from_cli(config_dir=tmp_path / "cfg", **flags))


class TestEmit:
    def test_success_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _app(tmp_path).emit(ServiceResult(ok=True, op="hello", data={"text": "Hi"}))
        captured = capsys.readouterr()
        assert captured.out == "Hi\n"
        assert captured.err == ""

    def test_warnings_to_stderr(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        result = ServiceResult(ok=True, op="update_standup", data={}, warnings=["careful"])
        _app(tmp_path).emit(result)
        assert "WARNING: careful" in capsys.readouterr().err

    def test_json_keeps_warnings_in_payload(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        result = ServiceResult(ok=True, op="update_standup", warnings=["careful"])
        _app(tmp_path, json_output=True).emit(result)
        captured = capsys.readouterr()
        assert json.loads(captured.out)["warnings"] == ["careful"]
        assert captured.err == ""

    def test_failure_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        result = ServiceResult(
            ok=False,
            op="get_repository",
            error=ServiceError(
                code="REPOSITORY_NOT_FOUND", message="Repository with ID x not found"
            ),
        )
        with pytest.raises(SystemExit) as exc_info:
            _app(tmp_path).emit(result)
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Repository with ID x not found" in captured.err


class TestStore:
    def test_store_is_lazy(self, tmp_path: Path) -> None:
        app = _app(tmp_path)
        assert not (tmp_path / "cfg").exists()
        assert app.store.path == tmp_path / "cfg" / "config.json"
        assert app.store is app.store
