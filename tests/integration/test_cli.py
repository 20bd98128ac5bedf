"""Integration tests for the command-line interface.

These tests run lingest in a subprocess and cover:
- Document generation and default output location
- Ignore, include and exclusion-file options
- Dry runs
- Existing output handling and exit codes
- Version information
"""

import subprocess
import sys
from pathlib import Path

import pytest

# Skip all tests in this module unless --run-cli-tests is given
# This prevents these slow tests from running during normal test runs
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_lingest(*args, cwd=None):
    """Run the lingest CLI in a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "lingest.cli.main", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
    )


@pytest.fixture
def temp_project(tmp_path, make_files):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "project"
    make_files(
        base_dir,
        {
            "src/main.py": "def main():\n    print('Hello')\n",
            "src/utils/helpers.py": "def helper():\n    pass\n",
            "src/main.pyc": b"compiled python",
            "docs/README.md": "# Test Project\nDescription.\n",
            "server.log": "DEBUG: test log\n",
            "package.json": '{"name": "test"}\n',
            "node_modules/module.js": "export default {}\n",
            "custom.ignore": "docs/\n",
        },
    )
    return base_dir


def test_default_output_in_working_directory(temp_project):
    result = run_lingest(cwd=temp_project)

    assert result.returncode == 0, result.stderr
    output = temp_project / "lingest_output.md"
    document = output.read_text(encoding="utf-8")
    assert document.startswith("Directory Structure:")
    assert "FILE: src/main.py" in document
    assert "server.log" not in document
    assert "node_modules" not in document
    assert "lingest_output.md" not in document


def test_second_run_requires_force(temp_project, tmp_path):
    output = tmp_path / "out.md"

    assert run_lingest("-o", str(output), str(temp_project)).returncode == 0
    first = output.read_text(encoding="utf-8")

    result = run_lingest("-o", str(output), str(temp_project))
    assert result.returncode == 1
    assert "already exists" in result.stderr
    assert output.read_text(encoding="utf-8") == first

    assert run_lingest("-f", "-o", str(output), str(temp_project)).returncode == 0


def test_ignore_include_and_exclusion_file(temp_project, tmp_path):
    output = tmp_path / "out.md"

    result = run_lingest(
        "-i",
        "**/utils",
        "-e",
        str(temp_project / "custom.ignore"),
        "-n",
        "*.py,*.md",
        "-o",
        str(output),
        str(temp_project),
    )

    assert result.returncode == 0, result.stderr
    document = output.read_text(encoding="utf-8")
    assert "FILE: src/main.py" in document
    assert "helpers.py" not in document
    assert "README.md" not in document
    assert "package.json" not in document


def test_no_tree(temp_project, tmp_path):
    output = tmp_path / "out.md"

    assert run_lingest("-T", "-o", str(output), str(temp_project)).returncode == 0
    assert output.read_text(encoding="utf-8").startswith("File Contents:")


def test_dry_run(temp_project, tmp_path):
    output = tmp_path / "out.md"

    result = run_lingest("--dry-run", "-o", str(output), str(temp_project))

    assert result.returncode == 0, result.stderr
    assert "[Dry Run] --- Summary ---" in result.stdout
    assert "FILE: src/main.py" in result.stdout
    assert not output.exists()


def test_quiet(temp_project, tmp_path):
    result = run_lingest("-q", "-o", str(tmp_path / "out.md"), str(temp_project))

    assert result.returncode == 0
    assert "Generated" not in result.stderr
    assert "Starting lingest" not in result.stderr


def test_invalid_directory(tmp_path):
    result = run_lingest(str(tmp_path / "missing"))

    assert result.returncode == 1
    assert "is not a valid directory" in result.stderr


def test_version():
    result = run_lingest("--version")

    assert result.returncode == 0
    assert result.stdout.startswith("lingest ")


def test_invalid_option():
    assert run_lingest("--not-an-option").returncode == 2


def test_output_is_relative_to_working_directory(temp_project, tmp_path):
    result = run_lingest("-o", "digest.md", str(temp_project), cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert Path(tmp_path / "digest.md").is_file()
    assert not (temp_project / "digest.md").exists()
