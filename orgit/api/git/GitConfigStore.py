"""ConfigStore backed by the git command line."""

import logging
import subprocess
from pathlib import Path

from ...utils.normalize_path import normalize_path
from .ConfigStore import ConfigStore
from .ConfigStoreError import ConfigStoreError

logger = logging.getLogger(__name__)

# `git config --get` exits with 1 when the key is not set
_KEY_NOT_SET = 1


class GitConfigStore(ConfigStore):
    """Read remotes and config values by running ``git -C <repo> ...``."""

    def __init__(self, timeout: float = 5.0, git: str = "git"):
        self.timeout = timeout
        self.git = git

    def _run(self, repo_path: str, *args: str) -> subprocess.CompletedProcess:
        cwd: Path = normalize_path(repo_path)
        cmd = [self.git, "-C", str(cwd), *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ConfigStoreError(repo_path, f"git executable not found ({self.git})") from e
        except subprocess.TimeoutExpired as e:
            raise ConfigStoreError(repo_path, f"git timed out after {self.timeout}s") from e

    def list_remotes(self, repo_path: str) -> list[str]:
        result = self._run(repo_path, "remote")
        if result.returncode != 0:
            raise ConfigStoreError(repo_path, result.stderr.strip() or "git remote failed")
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def get_config(self, repo_path: str, section: str, key: str) -> str | None:
        result = self._run(repo_path, "config", "--get", f"{section}.{key}")
        if result.returncode == _KEY_NOT_SET:
            return None
        if result.returncode != 0:
            raise ConfigStoreError(repo_path, result.stderr.strip() or f"git config {section}.{key} failed")
        return result.stdout.rstrip("\n")
