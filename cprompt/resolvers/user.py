# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
User Resolvers — Username element and the home directory lookup.

Both go through the user database with the same steps:
  1. ask the platform for the getpwuid_r buffer size
  2. look up the real uid within that bound
  3. copy the wanted field out of the record
"""

from __future__ import annotations

import logging
from typing import Union

from cprompt.kernel.system import System, UserRecord
from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Borrowed, Failed, HomeDirectory, Owned
from cprompt.resolvers import diagnostics
from cprompt.resolvers.base import BaseResolver
from cprompt.resolvers.diagnostics import format_error

logger = logging.getLogger("cprompt.resolvers.user")

NOBODY = "nobody"


def lookup_current_user(system: System) -> Union[UserRecord, Failed, None]:
    """
    Fetch the user-database record for the real uid.

    Returns the record, None if no record exists, or a Failed fragment.
    """
    try:
        bufsize = system.sysconf("SC_GETPW_R_SIZE_MAX")
    except ValueError:
        return Failed(diagnostics.NOGETPWRSIZEMAX)
    except OSError as exc:
        return format_error("!SYSCONF!", exc.errno, system.error_name)
    if bufsize < 0:
        return Failed(diagnostics.NOGETPWRSIZEMAX)

    try:
        return system.getpwuid(system.getuid(), bufsize)
    except OSError as exc:
        return format_error("!GETPWUIDR!", exc.errno, system.error_name)


def duplicate(text: str, limit: int) -> str:
    """Copy at most `limit` characters of `text` (strndup)."""
    return text[:limit]


def lookup_home(system: System, path_max: int) -> HomeDirectory:
    """$HOME if set, else the home field of the current user's record."""
    home = system.getenv("HOME")
    if home:
        return HomeDirectory.of(home, is_error=False, owned=False)

    logger.debug("HOME unset, falling back to the user database")
    record = lookup_current_user(system)
    if isinstance(record, Failed):
        return HomeDirectory.from_failure(record)
    if record is None:
        return HomeDirectory.of(diagnostics.USERNOTFOUND, is_error=True, owned=False)
    try:
        home = duplicate(record.home, path_max + 1)
    except MemoryError:
        return HomeDirectory.of(diagnostics.STRNDUP, is_error=True, owned=False)
    return HomeDirectory.of(home, is_error=False, owned=True)


class UsernameResolver(BaseResolver):
    resolver_id = "username"
    name = "Username"
    description = "Login name of the real uid"
    kinds = (PromptElementKind.USERNAME,)

    def resolve(self, element):
        record = lookup_current_user(self.system)
        if isinstance(record, Failed):
            return record
        if record is None:
            return Borrowed(NOBODY)
        try:
            return Owned(duplicate(record.name, self.settings.PATH_MAX + 1))
        except MemoryError:
            return Failed(diagnostics.STRNDUP)
