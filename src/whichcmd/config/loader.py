"""
Environment defaults for command resolution.

Every value is resolved at call time, never cached, so that changes to the
environment between two lookups are honored.

Priority (highest to lowest):
1. Explicit option passed by the caller
2. Environment variable (PATH, PATHEXT)
3. Built-in default (empty search path, DEFAULT_PATH_EXT)

Windows-only behavior (cwd-first search, PATHEXT) is selected from the
platform identity, which callers may override for testing.
"""

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum

from whichcmd.config.defaults import DEFAULT_PATH_EXT, WINDOWS_PLATFORM

logger = logging.getLogger(__name__)


class ConfigSource(Enum):
    """Source of a resolved value."""

    OPTION = "option"
    ENV = "env"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolvedValue:
    """A resolved setting and where it came from."""

    value: str
    source: ConfigSource

    def __repr__(self) -> str:
        return f"ResolvedValue(value={self.value!r}, source={self.source.value!r})"


def get_platform(platform: str | None = None) -> str:
    """Get the platform identity, defaulting to sys.platform."""
    return platform if platform is not None else sys.platform


def is_windows(platform: str | None = None) -> bool:
    """Check whether Windows lookup rules apply."""
    return get_platform(platform) == WINDOWS_PLATFORM


def get_delimiter(delimiter: str | None = None) -> str:
    """Get the path-list delimiter, defaulting to os.pathsep."""
    return delimiter if delimiter is not None else os.pathsep


def get_cwd() -> str:
    """Get the process working directory (searched first on Windows)."""
    return os.getcwd()


def resolve_search_path(path: str | None = None) -> ResolvedValue:
    """Resolve the delimiter-joined directory list to search.

    Args:
        path: Explicit search path, or None to use PATH.

    Returns:
        ResolvedValue holding the search path string (possibly empty).
    """
    if path is not None:
        return ResolvedValue(path, ConfigSource.OPTION)

    env_path = os.environ.get("PATH")
    if env_path is not None:
        return ResolvedValue(env_path, ConfigSource.ENV)

    logger.debug("PATH is not set, searching an empty path")
    return ResolvedValue("", ConfigSource.DEFAULT)


def resolve_path_ext(path_ext: str | None, delimiter: str) -> ResolvedValue:
    """Resolve the delimiter-joined extension list (Windows only).

    An empty ``path_ext`` counts as unset. When it is None, PATHEXT is
    consulted; when it is an empty string, the built-in list applies
    directly without looking at PATHEXT.

    Args:
        path_ext: Explicit extension list, or None to use PATHEXT.
        delimiter: Delimiter used to join the built-in list.

    Returns:
        ResolvedValue holding the raw, un-expanded extension string.
    """
    if path_ext:
        return ResolvedValue(path_ext, ConfigSource.OPTION)

    if path_ext is None:
        env_path_ext = os.environ.get("PATHEXT")
        if env_path_ext:
            return ResolvedValue(env_path_ext, ConfigSource.ENV)

    return ResolvedValue(delimiter.join(DEFAULT_PATH_EXT), ConfigSource.DEFAULT)
