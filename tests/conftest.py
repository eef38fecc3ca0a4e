"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def mdnav_home(tmp_path, monkeypatch) -> Path:
    """Isolate MDNAV_HOME and the editor environment for every test."""
    home = tmp_path / ".mdnav"
    monkeypatch.setenv("MDNAV_HOME", str(home))
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("VISUAL", raising=False)
    return home


@pytest.fixture
def write_config(mdnav_home):
    """Write a config.json under the isolated MDNAV_HOME."""

    def _write(data: dict | str) -> Path:
        mdnav_home.mkdir(parents=True, exist_ok=True)
        path = mdnav_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
