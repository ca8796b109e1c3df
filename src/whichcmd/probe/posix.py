"""
POSIX executable check: regular file with an execute bit the caller can use.
"""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from whichcmd.exceptions import WhichError

if TYPE_CHECKING:
    from collections.abc import Iterable

_USER = 0o100
_GROUP = 0o010
_OTHER = 0o001


def check_mode(
    st: os.stat_result,
    *,
    uid: int | None = None,
    gid: int | None = None,
    groups: Iterable[int] | None = None,
) -> bool:
    """Check whether the mode bits grant execute permission to the caller.

    Args:
        st: Result of os.stat() on the candidate
        uid: Caller uid (default: os.getuid())
        gid: Caller primary gid (default: os.getgid())
        groups: Caller supplementary groups (default: os.getgroups())

    Returns:
        True if "other", the matching group, the matching owner, or root
        (owner or group bit) may execute the file.

    Raises:
        WhichError: If the caller's uid or gid cannot be determined.
    """
    my_uid = uid if uid is not None else _os_id("getuid")
    my_groups = list(groups) if groups is not None else (_os_id("getgroups") or [])
    my_gid = gid if gid is not None else _os_id("getgid")
    if my_gid is None and my_groups:
        my_gid = my_groups[0]
    if my_uid is None or my_gid is None:
        raise WhichError("cannot get uid or gid")

    all_groups = {my_gid, *my_groups}
    mode = st.st_mode

    return bool(
        mode & _OTHER
        or (mode & _GROUP and st.st_gid in all_groups)
        or (mode & _USER and st.st_uid == my_uid)
        or (mode & (_USER | _GROUP) and my_uid == 0)
    )


def check_stat(st: os.stat_result, **ids) -> bool:
    """Regular file whose mode is executable for the caller."""
    return stat.S_ISREG(st.st_mode) and check_mode(st, **ids)


def _os_id(name: str) -> int | list[int] | None:
    func = getattr(os, name, None)
    return func() if func is not None else None
