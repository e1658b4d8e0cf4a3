"""Tests for catalog regeneration."""

from __future__ import annotations

import io
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from blitzdoc.core.catalog.index import CommandIndex
from blitzdoc.core.catalog.model import Command
from blitzdoc.core.rebuild import RebuildError, rebuild_catalog


def _fake_process(output: str, returncode: int = 0) -> MagicMock:
    process = MagicMock()
    process.stdout = io.StringIO(output)
    process.wait.return_value = returncode
    process.__enter__.return_value = process
    process.__exit__.return_value = False
    return process


@pytest.fixture()
def index() -> CommandIndex:
    index = CommandIndex()
    index.load([Command(real_name="Cls", search_name="cls")])
    return index


class TestRebuildCatalog:
    def test_runs_makedocs_under_root(self, tmp_path: Path) -> None:
        with patch("subprocess.Popen", return_value=_fake_process("")) as popen:
            rebuild_catalog(tmp_path)
        args, kwargs = popen.call_args
        assert args[0] == [str(tmp_path / "bin" / "makedocs")]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["stderr"] == subprocess.STDOUT

    def test_streams_output_lines(self, tmp_path: Path) -> None:
        lines: list[str] = []
        output = "Building brl.mod\n\n x\n  Done  \n"
        with patch("subprocess.Popen", return_value=_fake_process(output)):
            result = rebuild_catalog(tmp_path, on_output=lines.append)
        assert lines == ["Building brl.mod", "Done"]
        assert result.lines == 2
        assert result.returncode == 0
        assert result.duration_seconds >= 0

    def test_invalidates_index_on_success(self, tmp_path: Path, index: CommandIndex) -> None:
        with patch("subprocess.Popen", return_value=_fake_process("ok\n")):
            rebuild_catalog(tmp_path, index=index)
        assert index.is_populated is False

    def test_nonzero_exit_raises(self, tmp_path: Path, index: CommandIndex) -> None:
        with patch("subprocess.Popen", return_value=_fake_process("boom\n", returncode=2)):
            with pytest.raises(RebuildError) as excinfo:
                rebuild_catalog(tmp_path, index=index)
        assert excinfo.value.returncode == 2
        assert index.is_populated is False

    def test_spawn_error_raises(self, tmp_path: Path, index: CommandIndex) -> None:
        with patch("subprocess.Popen", side_effect=FileNotFoundError("makedocs")):
            with pytest.raises(RebuildError, match="Failed to start"):
                rebuild_catalog(tmp_path, index=index)
        assert index.is_populated is False

    def test_interrupt_stops_process(self, tmp_path: Path, index: CommandIndex) -> None:
        process = _fake_process("")
        process.stdout = MagicMock()
        process.stdout.__iter__.side_effect = KeyboardInterrupt
        with patch("subprocess.Popen", return_value=process):
            with pytest.raises(KeyboardInterrupt):
                rebuild_catalog(tmp_path, index=index)
        process.terminate.assert_called_once()
        assert index.is_populated is False

    def test_callback_error_stops_process(self, tmp_path: Path, index: CommandIndex) -> None:
        process = _fake_process("Building brl.mod\nBuilding pub.mod\n")

        def failing_output(line: str) -> None:
            raise RuntimeError("console closed")

        with patch("subprocess.Popen", return_value=process):
            with pytest.raises(RuntimeError, match="console closed"):
                rebuild_catalog(tmp_path, index=index, on_output=failing_output)
        process.terminate.assert_called_once()
        process.__exit__.assert_called_once()
        assert index.is_populated is False
