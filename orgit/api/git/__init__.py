"""Read-only access to repository configuration."""

from .ConfigStore import ConfigStore
from .ConfigStoreError import ConfigStoreError
from .GitConfigStore import GitConfigStore

__all__ = ["ConfigStore", "ConfigStoreError", "GitConfigStore"]
