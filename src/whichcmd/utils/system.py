"""
System utilities for finding executables.
"""

import sys
from pathlib import Path

from whichcmd.operations.locate import which_sync


def _venv_bin_dir() -> Path:
    scripts = "Scripts" if sys.platform == "win32" else "bin"
    return Path(sys.prefix) / scripts


def find_tool(name: str) -> str:
    """Find executable, checking venv first.

    Args:
        name: Tool name (e.g., "ruff", "git")

    Returns:
        Path to executable, or ``name`` unchanged if it was not found so
        that the caller can still hand it to subprocess.
    """
    # Check venv bin directory first
    venv = which_sync(name, path=str(_venv_bin_dir()), nothrow=True)
    if venv:
        return venv

    # Fall back to system PATH
    return which_sync(name, nothrow=True) or name
