"""Unit tests for the CLI main module."""

import logging
import os
from unittest.mock import patch

import pytest

from lingest.cli.main import configure_logging, main


@pytest.fixture(autouse=True)
def reset_lingest_logger():
    """Restore the package logger after main() reconfigured it."""
    lingest_logger = logging.getLogger("lingest")
    handlers, level = list(lingest_logger.handlers), lingest_logger.level
    yield
    lingest_logger.handlers = handlers
    lingest_logger.setLevel(level)


def run_main(argv):
    """Run main() with the given arguments and return its exit code."""
    with patch("sys.argv", ["lingest", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_configure_logging_levels():
    configure_logging(quiet=False)
    assert logging.getLogger("lingest").level == logging.INFO

    configure_logging(quiet=True)
    lingest_logger = logging.getLogger("lingest")
    assert lingest_logger.level == logging.WARNING
    assert len(lingest_logger.handlers) == 1


def test_main_writes_document(project, tmp_path, capsys):
    output = tmp_path / "digest.md"

    assert run_main(["-o", str(output), str(project)]) == 0

    document = output.read_text(encoding="utf-8")
    assert document.startswith("Directory Structure:")
    assert "FILE: src/main.py" in document
    assert "node_modules" not in document
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Generated {os.path.relpath(output)} with 5 file(s)." in captured.err


def test_main_quiet_suppresses_info(project, tmp_path, capsys):
    output = tmp_path / "digest.md"

    assert run_main(["-q", "-o", str(output), str(project)]) == 0

    err = capsys.readouterr().err
    assert "Generated" not in err
    assert "Starting lingest" not in err
    # Warnings about undecodable files are still shown
    assert "image.dat" in err


def test_main_dry_run_prints_summary(project, tmp_path, capsys):
    output = tmp_path / "digest.md"

    assert run_main(["--dry-run", "-o", str(output), str(project)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("[Dry Run] --- Summary ---")
    assert "[Dry Run] Would include content from 6 file(s):" in out
    assert "FILE: image.dat" in out
    assert f"[Dry Run] Output would be saved to: {output}" in out
    assert not output.exists()


def test_main_existing_output_exits_1(project, tmp_path, capsys):
    output = tmp_path / "digest.md"
    output.write_text("keep me")

    assert run_main(["-o", str(output), str(project)]) == 1

    assert output.read_text() == "keep me"
    assert "already exists. Use -f or --force to overwrite." in capsys.readouterr().err


def test_main_force_overwrites(project, tmp_path):
    output = tmp_path / "digest.md"
    output.write_text("old")

    assert run_main(["-f", "-o", str(output), str(project)]) == 0
    assert output.read_text(encoding="utf-8").startswith("Directory Structure:")


def test_main_invalid_directory_exits_1(tmp_path, capsys):
    assert run_main([str(tmp_path / "missing")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_negated_pattern_exits_1(project, tmp_path, capsys):
    assert run_main(["-i", "!keep.txt", "-o", str(tmp_path / "o.md"), str(project)]) == 1
    assert "Negated patterns are not supported: !keep.txt" in capsys.readouterr().err


def test_main_argument_error_exits_2(capsys):
    assert run_main(["--no-such-option"]) == 2


def test_main_keyboard_interrupt_exits_130(project, tmp_path, capsys):
    with patch("lingest.cli.main.run", side_effect=KeyboardInterrupt):
        assert run_main(["-o", str(tmp_path / "o.md"), str(project)]) == 130

    assert "Interrupted." in capsys.readouterr().err
