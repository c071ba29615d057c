"""Process-wide orgit configuration."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..link.RemotePattern import RemotePattern
from ..link.RemotePatternTable import DEFAULT_REMOTE_PATTERNS, RemotePatternTable
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

logger = logging.getLogger(__name__)


class OrgitConfig(BaseModel):
    """Settings that are not scoped to a single repository.

    Repository-scoped settings (``orgit.remote``, ``orgit.status``,
    ``orgit.log``, ``orgit.rev``) live in each repository's git config.
    """

    model_config = ConfigDict(extra="forbid")

    remote: str = Field("origin", description="Default public remote name")
    patterns: list[RemotePattern] = Field(
        default_factory=lambda: list(DEFAULT_REMOTE_PATTERNS),
        description="Ordered remote pattern table; replaces the default table when given",
    )
    git_timeout: float = Field(5.0, gt=0, description="Seconds to wait for each git call")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on ORGIT_HOME or default to ~/.orgit."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "OrgitConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            logger.debug(f"No configuration at {path}, using defaults")
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def pattern_table(self) -> RemotePatternTable:
        return RemotePatternTable(self.patterns)

    def to_dict(self) -> dict[str, Any]:
        """Convert OrgitConfig instance to a dictionary for serialization."""
        return {
            "remote": self.remote,
            "patterns": [pattern.model_dump() for pattern in self.patterns],
            "git_timeout": self.git_timeout,
            "log": self.log.model_dump(),
        }
