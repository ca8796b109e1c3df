"""
Windows executable check: regular file whose name ends with a PATHEXT entry.
"""

from __future__ import annotations

import os
import stat

from whichcmd.config.defaults import PATH_EXT_DELIMITER


def check_path_ext(
    path: str,
    path_ext: str | None = None,
    delimiter: str = PATH_EXT_DELIMITER,
) -> bool:
    """Check the file name against the extension list, ignoring case.

    Args:
        path: Candidate path
        path_ext: Delimiter-joined extensions (default: PATHEXT)
        delimiter: Separator between entries (default ";")

    Returns:
        True if any entry matches the end of ``path``. An empty entry
        (including an empty list) accepts every file.
    """
    if path_ext is None:
        path_ext = os.environ.get("PATHEXT") or ""

    entries = path_ext.split(delimiter)
    if "" in entries:
        return True

    lowered = path.lower()
    return any(lowered.endswith(entry.lower()) for entry in entries)


def check_stat(
    st: os.stat_result,
    path: str,
    path_ext: str | None = None,
    delimiter: str = PATH_EXT_DELIMITER,
) -> bool:
    """Regular file with an executable extension."""
    return stat.S_ISREG(st.st_mode) and check_path_ext(path, path_ext, delimiter)
