"""Config API module."""

from .LogConfig import LogConfig
from .OrgitConfig import OrgitConfig

__all__ = ["LogConfig", "OrgitConfig"]
