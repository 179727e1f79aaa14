# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
System Facade — Every OS and environment query the resolvers make.

Resolvers never touch os/pwd/socket directly; they call a System. The
production implementation is PosixSystem. Tests substitute a fake that
can simulate any failure.

Failure conventions (mirroring the underlying calls):
  - OSError carries the errno of a failed call
  - sysconf() raises ValueError when the platform does not know the
    limit, and returns -1 when the limit is indeterminate
  - getpwuid() returns None when no record exists for the uid
"""

from __future__ import annotations

import errno
import logging
import os
import pwd
import socket
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("cprompt.system")

STDOUT_FILENO = 1


@dataclass(frozen=True)
class UserRecord:
    """The user-database fields the resolvers care about."""
    name: str
    home: str


class System(ABC):
    """Read-only view of the process environment."""

    supports_process_paths: bool = False

    @abstractmethod
    def now(self) -> float:
        """Wall-clock seconds since the epoch."""

    def localtime(self, stamp: float) -> time.struct_time:
        return time.localtime(stamp)

    @abstractmethod
    def error_name(self, code: int) -> Optional[str]:
        """Canonical short name for an errno value, or None if unavailable."""

    @abstractmethod
    def sysconf(self, name: str) -> int: ...

    @abstractmethod
    def gethostname(self, length: int) -> str: ...

    @abstractmethod
    def isatty(self, fd: int) -> bool: ...

    @abstractmethod
    def ttyname(self, fd: int) -> str: ...

    @abstractmethod
    def getppid(self) -> int: ...

    @abstractmethod
    def process_path(self, pid: int) -> str:
        """Executable path of a process. Only called if supports_process_paths."""

    @abstractmethod
    def getuid(self) -> int: ...

    @abstractmethod
    def geteuid(self) -> int: ...

    @abstractmethod
    def getpwuid(self, uid: int, bufsize: int) -> Optional[UserRecord]: ...

    @abstractmethod
    def getcwd(self, size: int) -> str: ...

    @abstractmethod
    def getenv(self, name: str) -> Optional[str]: ...


def _os_error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


class PosixSystem(System):
    """System backed by the running POSIX host."""

    def __init__(self) -> None:
        # /proc/<pid>/exe is the only executable-path source we know of
        self.supports_process_paths = os.path.exists("/proc/self/exe")

    def now(self) -> float:
        return time.time()

    def error_name(self, code: int) -> Optional[str]:
        return errno.errorcode.get(code)

    def sysconf(self, name: str) -> int:
        return os.sysconf(name)

    def gethostname(self, length: int) -> str:
        name = socket.gethostname()
        # the name and its terminator must fit in `length` bytes
        if len(os.fsencode(name)) >= length:
            raise _os_error(errno.ENAMETOOLONG)
        return name

    def isatty(self, fd: int) -> bool:
        return os.isatty(fd)

    def ttyname(self, fd: int) -> str:
        return os.ttyname(fd)

    def getppid(self) -> int:
        return os.getppid()

    def process_path(self, pid: int) -> str:
        return os.readlink(f"/proc/{pid}/exe")

    def getuid(self) -> int:
        return os.getuid()

    def geteuid(self) -> int:
        return os.geteuid()

    def getpwuid(self, uid: int, bufsize: int) -> Optional[UserRecord]:
        try:
            entry = pwd.getpwuid(uid)
        except KeyError:
            return None
        # getpwuid_r stores every string field, terminated, in the caller's buffer
        needed = sum(
            len(os.fsencode(value)) + 1
            for value in (entry.pw_name, entry.pw_passwd, entry.pw_gecos,
                          entry.pw_dir, entry.pw_shell)
        )
        if needed > bufsize:
            logger.debug("passwd record for uid %d needs %d bytes, have %d", uid, needed, bufsize)
            raise _os_error(errno.ERANGE)
        return UserRecord(name=entry.pw_name, home=entry.pw_dir)

    def getcwd(self, size: int) -> str:
        cwd = os.getcwd()
        if len(os.fsencode(cwd)) >= size:
            raise _os_error(errno.ERANGE)
        return cwd

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)
