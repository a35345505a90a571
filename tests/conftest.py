"""
Pytest configuration and shared fixtures for pylicensed tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from pylicensed.logging import SilentLogger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path.resolve()


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to the configuration fixtures directory."""
    return (Path(__file__).parent / "fixtures" / "config").resolve()


@pytest.fixture(autouse=True)
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Pin the git repository root used by Configuration.root.

    Tests never depend on the repository the suite happens to run in.
    Override per test with monkeypatch to simulate "not a repository".
    """
    root = (tmp_path / "repo").resolve()
    root.mkdir()
    monkeypatch.setattr(
        "pylicensed.config.configuration.repository_root", lambda: root
    )
    return root


@pytest.fixture
def no_repo_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Simulate running outside of any git repository."""
    monkeypatch.setattr(
        "pylicensed.config.configuration.repository_root", lambda: None
    )


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into a fresh working directory for the duration of a test."""
    path = (tmp_path / "work").resolve()
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture(autouse=True)
def silent_logger():
    """Reset the global logger after each test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file(".licensed.yml", {"name": "app"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path

    return _create


@pytest.fixture
def create_json_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary JSON files.

    Usage:
        json_path = create_json_file(".licensed.json", {"name": "app"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _create


@pytest.fixture
def sample_apps_config() -> dict[str, Any]:
    """
    Provide a root configuration with two apps.

    Mirrors a monorepo with an API service and a web front end.
    """
    return {
        "override": "default",
        "default": "default",
        "apps": [
            {
                "name": "app1",
                "override": "override",
                "cache_path": "app1/vendor/licenses",
                "source_path": "app1",
            },
            {
                "name": "app2",
                "cache_path": "app2/vendor/licenses",
                "source_path": "app2",
            },
        ],
    }
