# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""Tty Resolver — Basename of the terminal attached to stdout."""

from __future__ import annotations

from cprompt.kernel.system import STDOUT_FILENO
from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Owned
from cprompt.resolvers.base import BaseResolver
from cprompt.resolvers.paths import basename_r


class TtyResolver(BaseResolver):
    resolver_id = "tty"
    name = "Tty Basename"
    description = "Device name of the stdout terminal, e.g. pts/3 -> 3"
    kinds = (PromptElementKind.TTY_BASENAME,)

    def resolve(self, element):
        # isatty() reports no errno, so the borrowed default is used
        if not self.system.isatty(STDOUT_FILENO):
            return self.fail("!ISATTY!")
        try:
            tty = self.system.ttyname(STDOUT_FILENO)
        except OSError as exc:
            return self.fail("!TTYNAME!", exc)
        try:
            return Owned(basename_r(tty, self.settings.PATH_MAX))
        except OSError as exc:
            return self.fail("!BASENAMER!", exc)
