"""Result of matching a remote URL against the pattern table."""

from dataclasses import dataclass

from .RemotePattern import RemotePattern


@dataclass(frozen=True)
class RemoteMatch:
    pattern: RemotePattern
    identifier: str
