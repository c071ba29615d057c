"""Link text plus the description stored alongside it."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredLink:
    link: str
    description: str
