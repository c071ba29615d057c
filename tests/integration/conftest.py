"""Integration test fixtures: real git repositories."""

from pathlib import Path

import pytest

from tests.conftest import git


@pytest.fixture
def github_repo(git_repo: Path) -> Path:
    """Repository with a single GitHub origin."""
    git(git_repo, "remote", "add", "origin", "https://github.com/alice/proj.git")
    return git_repo
