"""
Default values for command resolution.
"""

# Extensions tried on Windows when neither the caller nor PATHEXT supplies any
DEFAULT_PATH_EXT = (".EXE", ".CMD", ".BAT", ".COM")

# sys.platform value that selects Windows lookup rules
WINDOWS_PLATFORM = "win32"

# Delimiter the Windows executable check splits PATHEXT on
PATH_EXT_DELIMITER = ";"
