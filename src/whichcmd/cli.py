#!/usr/bin/env python3
"""
whichcmd CLI - locate programs on the search path.

Usage:
    whichcmd node
    whichcmd -a python3
    whichcmd -s git && echo "git is installed"
"""

import argparse
import logging
import sys

from whichcmd.operations.locate import which_sync
from whichcmd.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _cmd_which(args) -> int:
    """Look up every program; return 1 if any was not found."""
    status = 0
    for program in args.programs:
        result = which_sync(program, all=args.all, nothrow=True)
        if result is None:
            logger.debug(f"not found: {program}")
            status = 1
            continue
        if not args.silent:
            print("\n".join(result) if args.all else result)
    return status


def main():
    parser = argparse.ArgumentParser(
        prog="whichcmd",
        description="Locate a program file in the user's path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s node
    %(prog)s -a python3
    %(prog)s -s git
        """,
    )
    parser.add_argument("programs", nargs="+", metavar="program", help="Program name")
    parser.add_argument(
        "-a", "--all", action="store_true",
        help="Print all matching paths, not just the first",
    )
    parser.add_argument(
        "-s", "--silent", action="store_true",
        help="Print nothing, only set the exit status",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each probed candidate to stderr",
    )

    args = parser.parse_args()
    configure_logging(args.verbose)

    sys.exit(_cmd_which(args))


if __name__ == "__main__":
    main()
