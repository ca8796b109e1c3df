"""
Logging utilities.
"""

import logging
import sys

logger = logging.getLogger("whichcmd")


def configure_logging(verbose: bool = False) -> None:
    """Send whichcmd log records to stderr.

    Args:
        verbose: Log every probed candidate (DEBUG) instead of WARNING only
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )
