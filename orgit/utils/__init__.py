"""orgit utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .abbreviate_path import abbreviate_path
from .configure_logging import configure_logging
from .get_package_version import get_package_version
from .normalize_path import normalize_path

__all__ = [
    "abbreviate_path",
    "configure_logging",
    "get_package_version",
    "normalize_path",
]
