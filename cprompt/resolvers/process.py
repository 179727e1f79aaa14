# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""Parent Process Resolver — Executable path of the invoking shell."""

from __future__ import annotations

from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Failed, Owned
from cprompt.resolvers import diagnostics
from cprompt.resolvers.base import BaseResolver


class ParentProcessResolver(BaseResolver):
    resolver_id = "parent_process"
    name = "Parent Process"
    description = "Executable path of the parent process (usually the shell)"
    kinds = (PromptElementKind.PARENT_PROCESS_NAME,)

    def resolve(self, element):
        if not self.system.supports_process_paths:
            return Failed(diagnostics.NOPROC)
        try:
            return Owned(self.system.process_path(self.system.getppid()))
        except OSError as exc:
            return self.fail("!PROCPIDPATH!", exc)
