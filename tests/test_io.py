"""Tests for cookbook_scaffold.rendering.io."""

from __future__ import annotations

import os
import stat

import pytest

from cookbook_scaffold.rendering import io


class TestAtomicWriteText:
    def test_writes_text_and_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "metadata.rb"
        io.atomic_write_text(target, "name 'mycook'\n")
        assert target.read_text(encoding="utf-8") == "name 'mycook'\n"

    def test_leaves_no_temporary_files(self, tmp_path):
        target = tmp_path / "out.txt"
        io.atomic_write_text(target, "x")
        assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]

    def test_applies_mode(self, tmp_path):
        target = tmp_path / "script.sh"
        io.atomic_write_text(target, "#!/bin/sh\n", mode=0o755)
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o755

    def test_keeps_newlines_verbatim(self, tmp_path):
        target = tmp_path / "crlf.txt"
        io.atomic_write_text(target, "a\r\nb\n")
        assert target.read_bytes() == b"a\r\nb\n"

    def test_non_ascii(self, tmp_path):
        target = tmp_path / "README.md"
        io.atomic_write_text(target, "Café Ltd.\n")
        assert target.read_text(encoding="utf-8") == "Café Ltd.\n"

    def test_cleans_up_on_failure(self, tmp_path, monkeypatch):
        def fail(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(io.os, "replace", fail)
        with pytest.raises(OSError, match="disk full"):
            io.atomic_write_text(tmp_path / "out.txt", "x")
        assert list(tmp_path.iterdir()) == []


class TestCopyFile:
    def test_copies_bytes_and_mode(self, tmp_path):
        source = tmp_path / "run.sh"
        source.write_bytes(b"#!/bin/sh\necho hi\n")
        source.chmod(0o750)
        target = tmp_path / "dest" / "run.sh"

        io.copy_file(source, target)

        assert target.read_bytes() == source.read_bytes()
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o750

    def test_replaces_existing(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("new")
        target = tmp_path / "b.txt"
        target.write_text("old contents")

        io.copy_file(source, target)

        assert target.read_text() == "new"


class TestEnsureDir:
    def test_idempotent(self, tmp_path):
        path = tmp_path / "x" / "y"
        io.ensure_dir(path)
        io.ensure_dir(path)
        assert path.is_dir()
