"""Test configuration and fixtures for lingest."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def create_files(base_dir: Path, files: dict) -> Path:
    """Create files below base_dir. Values are str (text) or bytes (raw content)."""
    for relative_path, content in files.items():
        path = base_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return base_dir


@pytest.fixture
def make_files():
    """Return the helper that creates a file layout below a directory."""
    return create_files


@pytest.fixture
def project(tmp_path):
    """Create a small project tree with text, binary and ignored files."""
    root = tmp_path / "project"
    root.mkdir()
    create_files(
        root,
        {
            "src/main.py": "def main():\n    print('Hello')\n",
            "src/utils/helpers.py": "def helper():\n    pass\n",
            "src/main.pyc": b"\x00compiled python",
            "docs/README.md": "# Test Project\nDescription.\n",
            "node_modules/module.js": "export default {}\n",
            "Zeta.txt": "zeta\n",
            "alpha.txt": "alpha\n",
            "image.dat": b"\xff\xfe\x00\x81binary",
        },
    )
    return root
