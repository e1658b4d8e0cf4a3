"""Tests for reading the command catalog from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from blitzdoc.core.catalog.loader import load_catalog, read_catalog


class TestReadCatalog:
    def test_returns_full_text(self, tmp_path: Path) -> None:
        path = tmp_path / "commands.txt"
        path.write_text("Cls|/mod/a.mod/b.mod/c\n", encoding="utf-8")
        assert read_catalog(path) == "Cls|/mod/a.mod/b.mod/c\n"

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "commands.txt"
        path.write_bytes(b"Cls|\xff\xfe\n")
        with pytest.raises(UnicodeDecodeError):
            read_catalog(path)


class TestLoadCatalog:
    def test_parses_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "commands.txt"
        path.write_text("Cls|/mod/a.mod/b.mod/c\n\nFlip( sync% )|x\n", encoding="utf-8")
        assert [c.real_name for c in load_catalog(path)] == ["Cls", "Flip"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_catalog(tmp_path / "missing.txt")
