# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Cwd Resolver — Working directory with $HOME abbreviated.

The prefix match is textual: a cwd that starts with the home path is
collapsed even when the match ends mid-component.
"""

from __future__ import annotations

from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Owned
from cprompt.resolvers.base import BaseResolver
from cprompt.resolvers.paths import basename_r, collapse_home
from cprompt.resolvers.user import lookup_home

TILDE = "~"


class CwdResolver(BaseResolver):
    resolver_id = "cwd"
    name = "Working Directory"
    description = "Current directory with $HOME shown as ~, optionally only its basename"
    kinds = (PromptElementKind.CWD_TILDE, PromptElementKind.CWD_TILDE_BASENAME)

    def resolve(self, element):
        path_max = self.settings.PATH_MAX
        try:
            cwd = self.system.getcwd(path_max)
        except OSError as exc:
            return self.fail("!GETCWD!", exc)

        home = lookup_home(self.system, path_max)
        if home.is_error:
            return home.to_failure()

        replacement = element.argument if isinstance(element.argument, str) else TILDE
        cwd = collapse_home(cwd, home.text, replacement)

        if element.kind == PromptElementKind.CWD_TILDE_BASENAME:
            try:
                return Owned(basename_r(cwd, path_max))
            except OSError as exc:
                return self.fail("!BASENAMER!", exc)
        return Owned(cwd)
