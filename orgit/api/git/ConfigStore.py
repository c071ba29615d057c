"""Abstract interface for repository-scoped configuration."""

from abc import ABC, abstractmethod


class ConfigStore(ABC):
    """Read-only view of a repository's remotes and config values.

    Every call returns a snapshot; implementations never write to the
    repository.
    """

    @abstractmethod
    def list_remotes(self, repo_path: str) -> list[str]:
        """Return configured remote names in configuration order."""
        pass

    @abstractmethod
    def get_config(self, repo_path: str, section: str, key: str) -> str | None:
        """Return the value of ``section.key``, or None if it is unset."""
        pass

    def get_remote_url(self, repo_path: str, remote_name: str) -> str | None:
        """Return the fetch URL of ``remote_name``, or None if it has none."""
        return self.get_config(repo_path, f"remote.{remote_name}", "url")
