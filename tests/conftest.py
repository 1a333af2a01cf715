"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from locheck.utils.logger import reset_logging


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single api modules")
    config.addinivalue_line("markers", "integration: tests driving the CLI")


@pytest.fixture(autouse=True)
def locheck_home(tmp_path_factory, monkeypatch) -> Path:
    """Isolate LOCHECK_HOME (and its log file) outside the trees tests scan."""
    home = tmp_path_factory.mktemp("locheck_home")
    monkeypatch.setenv("LOCHECK_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Build a project tree under tmp_path/project."""

    def _make(files: dict[str, str]) -> Path:
        return write_tree(tmp_path / "project", files)

    return _make


@pytest.fixture
def make_strings(tmp_path: Path) -> Callable[..., Path]:
    """Write a resource file outside the project tree."""

    def _make(*lines: str, name: str = "Localizable.strings") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _make


@pytest.fixture
def run_cmd() -> Callable:
    """Execute a cmd function and return the result with its events.

    Returns a callable giving ``(result, events)``.
    """

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        events = list(result.progress_callback(result))
        return result, events

    return _run
