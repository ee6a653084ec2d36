"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture(scope="session", autouse=True)
def add_project_root_to_path():
    """Make the IAC package importable without an editable install."""
    sys.path.insert(0, str(PROJECT_ROOT))
    yield
    sys.path.remove(str(PROJECT_ROOT))


@pytest.fixture
def iac_project_root():
    """Return the IAC project root directory."""
    return PROJECT_ROOT / "IAC"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in IAC directory."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]
