"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import subprocess
from pathlib import Path

import pytest

from orgit.api.git.ConfigStore import ConfigStore


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that run git")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture(autouse=True)
def orgit_home(tmp_path: Path, monkeypatch) -> Path:
    """Point ORGIT_HOME at an empty directory so no test reads ~/.orgit."""
    home = tmp_path / "orgit_home"
    home.mkdir()
    monkeypatch.setenv("ORGIT_HOME", str(home))
    return home


@pytest.fixture
def write_config(orgit_home: Path):
    """Write a config.json into ORGIT_HOME."""

    def _write(data: dict) -> Path:
        path = orgit_home / "config.json"
        path.write_text(json.dumps(data))
        return path

    return _write


# =============================================================================
# Config Store Fakes
# =============================================================================


class FakeConfigStore(ConfigStore):
    """In-memory ConfigStore.

    ``repos`` maps a repository path to ``{"remotes": {name: url}, "config": {"section.key": value}}``.
    Every call is recorded in ``calls``.
    """

    def __init__(self, repos: dict | None = None):
        self.repos = repos or {}
        self.calls: list[tuple] = []

    def _repo(self, repo_path: str) -> dict:
        return self.repos.get(repo_path, {"remotes": {}, "config": {}})

    def list_remotes(self, repo_path: str) -> list[str]:
        self.calls.append(("list_remotes", repo_path))
        return list(self._repo(repo_path).get("remotes", {}))

    def get_config(self, repo_path: str, section: str, key: str) -> str | None:
        self.calls.append(("get_config", repo_path, f"{section}.{key}"))
        return self._repo(repo_path).get("config", {}).get(f"{section}.{key}")

    def get_remote_url(self, repo_path: str, remote_name: str) -> str | None:
        self.calls.append(("get_remote_url", repo_path, remote_name))
        return self._repo(repo_path).get("remotes", {}).get(remote_name)


@pytest.fixture
def fake_store() -> FakeConfigStore:
    """Store with /repo having a single GitHub origin."""
    return FakeConfigStore(
        {
            "/repo": {
                "remotes": {"origin": "https://github.com/alice/proj.git"},
                "config": {},
            }
        }
    )


# =============================================================================
# Git Helpers
# =============================================================================


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create an empty git repository with no remotes."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    git(repo_path, "init")
    return repo_path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
