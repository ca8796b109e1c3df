"""
Executable checks for lookup candidates.

Provides a blocking and an asyncio form of the same check. The platform
branch (POSIX mode bits or Windows extension list) follows the platform
identity passed in, defaulting to sys.platform.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import os

from whichcmd.config.defaults import PATH_EXT_DELIMITER
from whichcmd.config.loader import is_windows
from whichcmd.probe import posix, windows

logger = logging.getLogger(__name__)


def is_executable(
    path: str,
    *,
    path_ext: str | None = None,
    delimiter: str = PATH_EXT_DELIMITER,
    platform: str | None = None,
    ignore_errors: bool = False,
) -> bool:
    """Check whether ``path`` is an executable file.

    Args:
        path: Candidate path
        path_ext: Extension list for the Windows check (default: PATHEXT)
        delimiter: Separator between ``path_ext`` entries
        platform: Platform identity (default: sys.platform)
        ignore_errors: Treat any filesystem error as "not executable"

    Returns:
        True if the file exists and is executable on the platform.

    Raises:
        OSError: If stat() fails with anything but EACCES and
            ``ignore_errors`` is not set.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        if ignore_errors or e.errno == errno.EACCES:
            logger.debug(f"Cannot stat {path}: {e}")
            return False
        raise

    if is_windows(platform):
        return windows.check_stat(st, path, path_ext, delimiter)
    return posix.check_stat(st)


async def is_executable_async(
    path: str,
    *,
    path_ext: str | None = None,
    delimiter: str = PATH_EXT_DELIMITER,
    platform: str | None = None,
    ignore_errors: bool = False,
) -> bool:
    """Async version of is_executable(), run in a worker thread."""
    return await asyncio.to_thread(
        is_executable,
        path,
        path_ext=path_ext,
        delimiter=delimiter,
        platform=platform,
        ignore_errors=ignore_errors,
    )


__all__ = [
    "is_executable",
    "is_executable_async",
]
