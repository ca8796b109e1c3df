"""
Command lookup operations.
"""

from whichcmd.operations.locate import which, which_sync
from whichcmd.operations.path_info import (
    compute_path_info,
    get_path_part,
    iter_candidates,
)

__all__ = [
    "which",
    "which_sync",
    "compute_path_info",
    "get_path_part",
    "iter_candidates",
]
