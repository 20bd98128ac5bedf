"""Tests for the atomic output writer."""

import os
import stat
from unittest.mock import patch

import pytest

from lingest.io.atomic_writer import AtomicWriter


def _leftovers(directory):
    return [name for name in os.listdir(directory) if name.endswith(".tmp")]


def test_write_and_commit(tmp_path):
    target = tmp_path / "out.md"

    with AtomicWriter(target) as writer:
        writer.write("first ")
        writer.write("second")
        assert not target.exists()

    assert target.read_text(encoding="utf-8") == "first second"
    assert _leftovers(tmp_path) == []


def test_replaces_existing_file(tmp_path):
    target = tmp_path / "out.md"
    target.write_text("old")

    with AtomicWriter(target) as writer:
        writer.write("new")

    assert target.read_text() == "new"


def test_newlines_are_written_unchanged(tmp_path):
    target = tmp_path / "out.md"

    with AtomicWriter(target) as writer:
        writer.write("a\r\nb\n")

    assert target.read_bytes() == b"a\r\nb\n"


def test_exception_in_block_discards(tmp_path):
    target = tmp_path / "out.md"
    target.write_text("old")

    with pytest.raises(RuntimeError):
        with AtomicWriter(target) as writer:
            writer.write("partial")
            raise RuntimeError("boom")

    assert target.read_text() == "old"
    assert _leftovers(tmp_path) == []


def test_failed_replace_keeps_destination(tmp_path):
    target = tmp_path / "out.md"
    target.write_text("old")

    with patch("lingest.io.atomic_writer.os.replace", side_effect=OSError(28, "No space left on device")):
        with pytest.raises(OSError):
            with AtomicWriter(target) as writer:
                writer.write("new")

    assert target.read_text() == "old"
    assert _leftovers(tmp_path) == []


def test_write_after_commit_raises(tmp_path):
    writer = AtomicWriter(tmp_path / "out.md")
    writer.commit()

    with pytest.raises(ValueError, match="closed"):
        writer.write("late")


def test_discard_without_destination(tmp_path):
    target = tmp_path / "out.md"
    writer = AtomicWriter(target)
    writer.write("never")
    writer.discard()
    writer.discard()

    assert not target.exists()
    assert _leftovers(tmp_path) == []


def test_missing_parent_directory(tmp_path):
    with pytest.raises(OSError):
        AtomicWriter(tmp_path / "missing" / "out.md")


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_file_mode_follows_umask(tmp_path):
    old_umask = os.umask(0o022)
    try:
        with AtomicWriter(tmp_path / "out.md") as writer:
            writer.write("x")
    finally:
        os.umask(old_umask)

    assert stat.S_IMODE(os.stat(tmp_path / "out.md").st_mode) == 0o644
