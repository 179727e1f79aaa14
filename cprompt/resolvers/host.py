# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""Hostname Resolver — Full hostname or the part before the first dot."""

from __future__ import annotations

from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Failed, Owned
from cprompt.resolvers import diagnostics
from cprompt.resolvers.base import BaseResolver


class HostnameResolver(BaseResolver):
    resolver_id = "hostname"
    name = "Hostname"
    description = "System hostname, optionally cut at the first dot"
    kinds = (PromptElementKind.HOSTNAME_SHORT, PromptElementKind.HOSTNAME_FULL)

    def resolve(self, element):
        try:
            length = self.system.sysconf("SC_HOST_NAME_MAX")
        except ValueError:
            return Failed(diagnostics.NOHOSTNAMEMAX)
        except OSError as exc:
            return self.fail("!SYSCONF!", exc)
        if length < 0:
            return Failed(diagnostics.NOHOSTNAMEMAX)

        try:
            # HOST_NAME_MAX excludes the terminator
            hostname = self.system.gethostname(length + 1)
        except OSError as exc:
            return self.fail("!GETHOSTNAME!", exc)

        if element.kind == PromptElementKind.HOSTNAME_SHORT:
            hostname = hostname.split(".", 1)[0]
        return Owned(hostname)
