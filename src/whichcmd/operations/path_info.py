"""
Lookup planning: which directories and which suffixes to try, in order.

Shell rules reproduced here:
- A command containing a path separator is used as given, PATH is ignored
- Windows searches the current directory before PATH
- Windows tries each PATHEXT entry, then its lowercase twin
- A command that already has a dot is tried without a suffix first
- Quoted PATH entries ("C:\\Program Files\\x") have their quotes stripped
- ``./cmd`` keeps its ``./`` prefix instead of being normalized away
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from whichcmd.config.loader import (
    get_cwd,
    get_delimiter,
    is_windows,
    resolve_path_ext,
    resolve_search_path,
)
from whichcmd.models.options import PathInfo, SearchOptions

logger = logging.getLogger(__name__)

# "/" always counts as a separator, plus the native one where it differs
_SEPARATORS = ("/",) if os.sep == "/" else ("/", os.sep)


def has_separator(cmd: str) -> bool:
    """Check whether the command names a path rather than a bare program."""
    return any(sep in cmd for sep in _SEPARATORS)


def is_dot_relative(cmd: str) -> bool:
    """Check for a leading ``./`` (or ``.`` plus the native separator)."""
    return len(cmd) >= 2 and cmd[0] == "." and cmd[1] in _SEPARATORS


def compute_path_info(cmd: str, options: SearchOptions) -> PathInfo:
    """Compute the directories and extensions to try for ``cmd``.

    Args:
        cmd: Command name or path
        options: Search options; unset values come from the environment

    Returns:
        PathInfo with at least one directory and one extension.
    """
    delimiter = get_delimiter(options.delimiter)
    windows = is_windows(options.platform)

    if has_separator(cmd):
        search_dirs: tuple[str, ...] = ("",)
    else:
        search_path = resolve_search_path(options.path)
        logger.debug(
            f"Search path from {search_path.source.value}: {search_path.value!r}"
        )
        search_dirs = tuple(search_path.value.split(delimiter))
        if windows:
            search_dirs = (get_cwd(), *search_dirs)

    if not windows:
        return PathInfo(search_dirs=search_dirs, extensions=("",))

    path_ext = resolve_path_ext(options.path_ext, delimiter)
    logger.debug(f"Extensions from {path_ext.source.value}: {path_ext.value!r}")

    extensions = [
        variant
        for ext in path_ext.value.split(delimiter)
        for variant in (ext, ext.lower())
    ]
    if "." in cmd and extensions[0] != "":
        extensions.insert(0, "")

    return PathInfo(
        search_dirs=search_dirs,
        extensions=tuple(extensions),
        extension_list=path_ext.value,
    )


def get_path_part(raw: str, cmd: str) -> str:
    """Join one search directory with the command.

    Args:
        raw: Search directory, possibly wrapped in double quotes, or ""
        cmd: Command name or path

    Returns:
        Normalized joined path. A ``./`` prefix on ``cmd`` survives when
        there is no directory part.
    """
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        part = raw[1:-1]
    else:
        part = raw

    prefix = cmd[:2] if not part and is_dot_relative(cmd) else ""
    joined = os.path.normpath(os.path.join(part, cmd))
    # normpath drops a trailing separator; "tool/" must not match a file
    if cmd.endswith(_SEPARATORS) and not joined.endswith(_SEPARATORS):
        joined += os.sep
    return prefix + joined


def iter_candidates(cmd: str, info: PathInfo) -> Iterator[str]:
    """Yield every candidate path, directory-major then extension-minor."""
    for raw in info.search_dirs:
        base = get_path_part(raw, cmd)
        for ext in info.extensions:
            yield base + ext
