"""
Utility functions for whichcmd.
"""

from whichcmd.utils.logging import configure_logging
from whichcmd.utils.system import find_tool

__all__ = [
    "configure_logging",
    "find_tool",
]
