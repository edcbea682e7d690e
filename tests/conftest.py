"""Pytest configuration and shared fixtures."""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from duke_cli.config import Config  # noqa: E402
from duke_cli.task_list import TaskList  # noqa: E402
from duke_cli.ui import UI  # noqa: E402


@pytest.fixture
def tasks():
    """An empty task list with the default capacity."""
    return TaskList()


@pytest.fixture
def ui():
    """A UI that writes to an in-memory console."""
    console = Console(file=io.StringIO(), width=200, color_system=None)
    return UI(console)


@pytest.fixture
def output(ui):
    """Return a callable giving the lines printed so far."""
    def read_lines():
        return ui.console.file.getvalue().splitlines()
    return read_lines


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Keep the cached configuration from leaking between tests."""
    Config._instance = None
    yield
    Config._instance = None
