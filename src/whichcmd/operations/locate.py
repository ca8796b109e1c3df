"""
Resolve a command name to executable path(s), blocking or with asyncio.

Both forms plan the lookup with compute_path_info(), walk the same
candidate order and differ only in how each candidate is checked. Probes
run one at a time in both forms; first-match mode stops at the first hit.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, overload

from whichcmd.config.loader import get_delimiter
from whichcmd.exceptions import NotFoundError, enoent
from whichcmd.models.options import PathInfo, SearchOptions
from whichcmd.operations.path_info import compute_path_info, iter_candidates
from whichcmd.probe import is_executable, is_executable_async

logger = logging.getLogger(__name__)


def _build_options(
    options: SearchOptions | None, overrides: dict[str, Any]
) -> SearchOptions:
    if options is None:
        return SearchOptions(**overrides)
    if not overrides:
        return options
    return SearchOptions.model_validate({**options.model_dump(), **overrides})


def _finish(
    cmd: str, found: list[str], options: SearchOptions
) -> list[str] | NotFoundError | None:
    """Outcome once every candidate was checked without an early return.

    The NotFoundError is returned, not raised, so that the public entry
    point raises it and stays the innermost traceback frame.
    """
    if found or options.nothrow:
        return found or None
    return NotFoundError(cmd)


def _probe_kwargs(info: PathInfo, options: SearchOptions) -> dict[str, Any]:
    return {
        "path_ext": info.extension_list,
        "delimiter": get_delimiter(options.delimiter),
        "platform": options.platform,
        "ignore_errors": True,
    }


@overload
def which_sync(
    cmd: str,
    options: None = None,
    *,
    all: Literal[False] = False,
    nothrow: Literal[False] = False,
    **kwargs: Any,
) -> str: ...


@overload
def which_sync(
    cmd: str,
    options: None = None,
    *,
    all: Literal[True],
    nothrow: Literal[False] = False,
    **kwargs: Any,
) -> list[str]: ...


@overload
def which_sync(
    cmd: str,
    options: None = None,
    *,
    all: Literal[False] = False,
    nothrow: Literal[True],
    **kwargs: Any,
) -> str | None: ...


@overload
def which_sync(
    cmd: str,
    options: None = None,
    *,
    all: Literal[True],
    nothrow: Literal[True],
    **kwargs: Any,
) -> list[str] | None: ...


@overload
def which_sync(
    cmd: str, options: SearchOptions, **kwargs: Any
) -> str | list[str] | None: ...


def which_sync(
    cmd: str, options: SearchOptions | None = None, **kwargs: Any
) -> str | list[str] | None:
    """Find ``cmd`` on the search path, blocking on each check.

    Args:
        cmd: Command name or path (e.g., "node", "./script", "/bin/sh")
        options: Prebuilt SearchOptions; keyword arguments override it
        **kwargs: SearchOptions fields (all, nothrow, path, path_ext,
            delimiter, platform)

    Returns:
        First matching path, or every match with ``all=True``. None when
        nothing matched and ``nothrow=True``.

    Raises:
        NotFoundError: If nothing matched and ``nothrow`` is not set.
        pydantic.ValidationError: If an option is invalid.
    """
    opts = _build_options(options, kwargs)
    info = compute_path_info(cmd, opts)
    probe_kwargs = _probe_kwargs(info, opts)
    found: list[str] = []

    for candidate in iter_candidates(cmd, info):
        logger.debug(f"Checking {candidate}")
        if not is_executable(candidate, **probe_kwargs):
            continue
        logger.debug(f"Found {cmd}: {candidate}")
        if not opts.all:
            return candidate
        found.append(candidate)

    result = _finish(cmd, found, opts)
    if isinstance(result, NotFoundError):
        raise result from enoent(cmd)
    return result


@overload
async def which(
    cmd: str,
    options: None = None,
    *,
    all: Literal[False] = False,
    nothrow: Literal[False] = False,
    **kwargs: Any,
) -> str: ...


@overload
async def which(
    cmd: str,
    options: None = None,
    *,
    all: Literal[True],
    nothrow: Literal[False] = False,
    **kwargs: Any,
) -> list[str]: ...


@overload
async def which(
    cmd: str,
    options: None = None,
    *,
    all: Literal[False] = False,
    nothrow: Literal[True],
    **kwargs: Any,
) -> str | None: ...


@overload
async def which(
    cmd: str,
    options: None = None,
    *,
    all: Literal[True],
    nothrow: Literal[True],
    **kwargs: Any,
) -> list[str] | None: ...


@overload
async def which(
    cmd: str, options: SearchOptions, **kwargs: Any
) -> str | list[str] | None: ...


async def which(
    cmd: str, options: SearchOptions | None = None, **kwargs: Any
) -> str | list[str] | None:
    """Async version of which_sync().

    Each candidate is checked in a worker thread and awaited before the
    next one starts, so results and ordering match which_sync().
    """
    opts = _build_options(options, kwargs)
    info = compute_path_info(cmd, opts)
    probe_kwargs = _probe_kwargs(info, opts)
    found: list[str] = []

    for candidate in iter_candidates(cmd, info):
        logger.debug(f"Checking {candidate}")
        if not await is_executable_async(candidate, **probe_kwargs):
            continue
        logger.debug(f"Found {cmd}: {candidate}")
        if not opts.all:
            return candidate
        found.append(candidate)

    result = _finish(cmd, found, opts)
    if isinstance(result, NotFoundError):
        raise result from enoent(cmd)
    return result
