"""
whichcmd - Find executables on the search path, like the shell does.

Resolves a command name to the path that would run it:
1. A command containing a slash is checked as given
2. Otherwise each PATH directory is searched in order (cwd first on Windows)
3. On Windows each PATHEXT extension is tried, then its lowercase twin
"""

# Lookup
from whichcmd.operations.locate import which, which_sync

# Exceptions
from whichcmd.exceptions import NotFoundError, WhichError

# Models
from whichcmd.models.options import PathInfo, SearchOptions
from whichcmd.operations.path_info import compute_path_info

# Executable checks
from whichcmd.probe import is_executable, is_executable_async

__version__ = "1.0.0"

__all__ = [
    # Core functions
    "which",
    "which_sync",
    "compute_path_info",
    "is_executable",
    "is_executable_async",
    # Models
    "SearchOptions",
    "PathInfo",
    # Exceptions
    "WhichError",
    "NotFoundError",
]
