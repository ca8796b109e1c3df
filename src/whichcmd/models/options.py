"""
Search options and the per-call lookup plan derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """Options accepted by which() and which_sync().

    The ``all`` and ``nothrow`` flags select one of four result shapes:

    ========  ==========  ==========================================
    all       nothrow     result
    ========  ==========  ==========================================
    False     False       str, raises NotFoundError when missing
    True      False       list[str], raises NotFoundError when missing
    False     True        str or None
    True      True        list[str] or None
    ========  ==========  ==========================================

    Any of ``path``, ``path_ext``, ``delimiter`` and ``platform`` left as
    None is resolved from the environment at lookup time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    all: bool = False
    path: str | None = None
    path_ext: str | None = Field(default=None, alias="pathExt")
    delimiter: str | None = Field(default=None, min_length=1)
    nothrow: bool = False
    platform: str | None = None


@dataclass(frozen=True)
class PathInfo:
    """Directories and suffixes to try for one lookup.

    Attributes:
        search_dirs: Directories in priority order. ``("",)`` means the
            command is used as given, without a directory prefix.
        extensions: Suffixes in priority order. ``""`` means no suffix.
        extension_list: Raw extension string handed to the executable
            check on Windows, None elsewhere.
    """

    search_dirs: tuple[str, ...]
    extensions: tuple[str, ...]
    extension_list: str | None = None
