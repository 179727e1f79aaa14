# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Shared test fixtures for all cprompt tests.
"""

import errno
import time
from typing import Dict, Optional

import pytest

from cprompt.core.config import PromptSettings
from cprompt.kernel.engine import build_engine
from cprompt.kernel.system import System, UserRecord


def _os_error(code: int) -> OSError:
    return OSError(code, "simulated")


class FakeSystem(System):
    """
    Deterministic System. Every query answers from an attribute; setting
    the matching *_error attribute to an exception makes the query raise it.
    """

    def __init__(self) -> None:
        self.clock: float = 1_700_000_000.0  # Tue Nov 14 2023 22:13:20 UTC
        self.clock_error: Optional[BaseException] = None
        self.error_names: Optional[Dict[int, str]] = dict(errno.errorcode)
        self.sysconf_values: Dict[str, object] = {
            "SC_HOST_NAME_MAX": 64,
            "SC_GETPW_R_SIZE_MAX": 1024,
        }
        self.hostname = "build01.example.com"
        self.hostname_error: Optional[OSError] = None
        self.tty = True
        self.tty_name = "/dev/pts/3"
        self.tty_error: Optional[OSError] = None
        self.supports_process_paths = True
        self.ppid = 4242
        self.process_paths: Dict[int, str] = {4242: "/bin/zsh"}
        self.uid = 1000
        self.euid = 1000
        self.users: Dict[int, UserRecord] = {1000: UserRecord(name="alice", home="/home/alice")}
        self.pw_error: Optional[OSError] = None
        self.cwd = "/home/alice/proj"
        self.cwd_error: Optional[OSError] = None
        self.env: Dict[str, str] = {"HOME": "/home/alice"}
        self.calls: Dict[str, int] = {}

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def now(self) -> float:
        self._count("now")
        if self.clock_error is not None:
            raise self.clock_error
        return self.clock

    def localtime(self, stamp):
        return time.gmtime(stamp)

    def error_name(self, code):
        if self.error_names is None:
            return None
        return self.error_names.get(code)

    def sysconf(self, name):
        value = self.sysconf_values[name]
        if isinstance(value, BaseException):
            raise value
        return value

    def gethostname(self, length):
        if self.hostname_error is not None:
            raise self.hostname_error
        if len(self.hostname) >= length:
            raise _os_error(errno.ENAMETOOLONG)
        return self.hostname

    def isatty(self, fd):
        return self.tty

    def ttyname(self, fd):
        if self.tty_error is not None:
            raise self.tty_error
        return self.tty_name

    def getppid(self):
        return self.ppid

    def process_path(self, pid):
        if pid not in self.process_paths:
            raise _os_error(errno.ESRCH)
        return self.process_paths[pid]

    def getuid(self):
        return self.uid

    def geteuid(self):
        return self.euid

    def getpwuid(self, uid, bufsize):
        self._count("getpwuid")
        if self.pw_error is not None:
            raise self.pw_error
        return self.users.get(uid)

    def getcwd(self, size):
        if self.cwd_error is not None:
            raise self.cwd_error
        if len(self.cwd) >= size:
            raise _os_error(errno.ERANGE)
        return self.cwd

    def getenv(self, name):
        return self.env.get(name)


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def prompt_settings() -> PromptSettings:
    return PromptSettings(_env_file=None)


@pytest.fixture
def engine(fake_system, prompt_settings):
    """Engine with all built-in resolvers over the fake system."""
    return build_engine(fake_system, prompt_settings)
