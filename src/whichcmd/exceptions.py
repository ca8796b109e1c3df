"""
Custom exceptions for whichcmd.

All whichcmd exceptions inherit from WhichError for easy catching.
"""

from __future__ import annotations

import errno
import os
from typing import Any


class WhichError(Exception):
    """Base exception for all whichcmd errors."""

    pass


class NotFoundError(WhichError):
    """No directory/extension combination produced an executable.

    Attributes:
        command: The command string that was searched for
        message: Human-readable error message ("not found: <command>")
        code: Machine-readable error code, always "ENOENT"
        errno: Numeric errno equivalent of ``code``
    """

    code = "ENOENT"
    errno = errno.ENOENT

    def __init__(self, command: str):
        self.command = command
        self.message = f"not found: {command}"
        super().__init__(self.message)

    def __reduce__(self):
        return (self.__class__, (self.command,))

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "command": self.command,
        }


def enoent(command: str) -> FileNotFoundError:
    """Build the ENOENT cause chained onto a NotFoundError."""
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), command)
