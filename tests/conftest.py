"""
Pytest configuration and shared fixtures for the autobuilder test suite.
"""

import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autobuilder.models import AutobuilderConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path).resolve()
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def project_dir(temp_dir):
    """A project directory containing a single tracked source file."""
    project = temp_dir / "project"
    project.mkdir()
    (project / "main.go").write_text("package main\n")
    return project


def write_python_executable(path: Path, body: str) -> Path:
    """Write an executable Python script that runs with the test interpreter."""
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_app(project_dir):
    """Factory writing the project's binary as a Python script."""
    def _make(body: str, name: str = "app") -> Path:
        return write_python_executable(project_dir / name, body)
    return _make


@pytest.fixture
def make_config(project_dir):
    """Factory for configurations pointing at project_dir."""
    def _make(**kwargs) -> AutobuilderConfig:
        values = {"app_path": project_dir, "app_name": "app", "poll_interval": 0.05}
        values.update(kwargs)
        return AutobuilderConfig(**values)
    return _make


def set_mtime(path: Path, timestamp: float) -> None:
    """Set both access and modification time of path."""
    os.utime(path, (timestamp, timestamp))


@pytest.fixture
def touch():
    """Fixture form of set_mtime."""
    return set_mtime
