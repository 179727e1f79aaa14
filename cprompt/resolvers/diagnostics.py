# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Diagnostic tokens — Uniform `!NAME!` text for failed resolutions.

format_error() is the one place an OS error code becomes prompt text.
The code is always passed in explicitly.
"""

from __future__ import annotations

from typing import Callable, Optional

from cprompt.protocols.fragments import Failed

# Longest canonical errno name we keep
ERROR_NAME_MAX = 20

ErrorNamer = Callable[[int], Optional[str]]

# Borrowed tokens shared across resolvers
MALLOC = "!MALLOC!"
STRFTIME = "!STRFTIME!"
NOHOSTNAMEMAX = "!NOHOSTNAMEMAX!"
NOGETPWRSIZEMAX = "!NOGETPWRSIZEMAX!"
NOPROC = "!NOPROC!"
STRNDUP = "!STRNDUP!"
USERNOTFOUND = "!USERNOTFOUND!"


def format_error(
    default: str,
    code: Optional[int],
    namer: Optional[ErrorNamer] = None,
) -> Failed:
    """
    Build the diagnostic fragment for a failed OS call.

    If `namer` can name `code`, the result is an owned `!<NAME>!` token.
    Otherwise the borrowed `default` is returned. Never raises for
    allocation failure.
    """
    if code is None or namer is None:
        return Failed(default)
    name = namer(code)
    if not name:
        return Failed(default)
    try:
        return Failed(f"!{name[:ERROR_NAME_MAX]}!", diagnostic_owned=True)
    except MemoryError:
        return Failed(default)
