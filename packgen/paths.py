"""Path helpers for collaborators that pick package folders."""

from __future__ import annotations

import os
from typing import Union

from .errors import InvalidPathRelation

PathArg = Union[str, "os.PathLike[str]"]


def relative_path(absolute_path: PathArg, base_path: PathArg) -> str:
    """Return ``absolute_path`` expressed relative to ``base_path``.

    Both arguments must be absolute. An empty argument yields an empty
    string, trailing separators are ignored, and the result always uses
    ``/`` separators. The filesystem is never touched.
    """
    target = os.fspath(absolute_path)
    base = os.fspath(base_path)
    if not target or not base:
        return ""

    for value in (target, base):
        if not os.path.isabs(value):
            raise InvalidPathRelation(f"{value!r} is not an absolute path")

    try:
        relative = os.path.relpath(os.path.normpath(target), os.path.normpath(base))
    except ValueError as exc:
        # e.g. different drives on Windows
        raise InvalidPathRelation(
            f"{target!r} cannot be expressed relative to {base!r}"
        ) from exc

    if relative == os.curdir:
        return ""
    return relative.replace(os.sep, "/")


__all__ = ["relative_path"]
