"""
Data models for whichcmd.
"""

from whichcmd.models.options import PathInfo, SearchOptions

__all__ = [
    "PathInfo",
    "SearchOptions",
]
