# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""Path helpers shared by the tty and cwd resolvers."""

from __future__ import annotations

import errno
import os


def basename_r(path: str, path_max: int) -> str:
    """
    Last component of `path`, following basename(3).

    "" -> ".", "/" -> "/", "/a/b/" -> "b". Raises OSError(ENAMETOOLONG)
    when the component plus terminator exceeds `path_max`.
    """
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    base = stripped.rsplit("/", 1)[-1]
    if len(os.fsencode(base)) + 1 > path_max:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG))
    return base


def collapse_home(cwd: str, home: str, replacement: str = "~") -> str:
    """Replace a leading `home` in `cwd` with `replacement`."""
    if home and cwd.startswith(home):
        return replacement + cwd[len(home):]
    return cwd
