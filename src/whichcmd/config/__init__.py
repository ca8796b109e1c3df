"""
Configuration for whichcmd.

Contains lookup defaults and the environment resolution helpers.
"""

from whichcmd.config.defaults import (
    DEFAULT_PATH_EXT,
    PATH_EXT_DELIMITER,
    WINDOWS_PLATFORM,
)
from whichcmd.config.loader import (
    ConfigSource,
    ResolvedValue,
    get_cwd,
    get_delimiter,
    get_platform,
    is_windows,
    resolve_path_ext,
    resolve_search_path,
)

__all__ = [
    "DEFAULT_PATH_EXT",
    "PATH_EXT_DELIMITER",
    "WINDOWS_PLATFORM",
    # Loader
    "ConfigSource",
    "ResolvedValue",
    "get_cwd",
    "get_delimiter",
    "get_platform",
    "is_windows",
    "resolve_path_ext",
    "resolve_search_path",
]
