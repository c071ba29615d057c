"""Utility to discover the orgit home directory."""

import os
from pathlib import Path

from ...utils.normalize_path import normalize_path


def get_home_dir() -> Path:
    """Get orgit home directory based on ORGIT_HOME or default to ~/.orgit."""
    home_env = os.environ.get("ORGIT_HOME")
    if home_env:
        return normalize_path(home_env)
    return Path.home() / ".orgit"
