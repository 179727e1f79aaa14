# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Time Resolver — Date and time-of-day elements.

Output is bounded like a fixed strftime buffer: anything that would not
fit in MAX_STRFTIME_SIZE bytes with its terminator, an empty result, or
a pattern the platform rejects all render as !STRFTIME!.
"""

from __future__ import annotations

import logging
import os
import time

from cprompt.protocols.elements import PromptElement, PromptElementKind
from cprompt.protocols.fragments import Failed, Owned, ResolvedFragment
from cprompt.resolvers import diagnostics
from cprompt.resolvers.base import BaseResolver

logger = logging.getLogger("cprompt.resolvers.clock")

# bash equivalents: \d, \t, \T, \@, \A
TIME_PATTERNS = {
    PromptElementKind.WEEKDAY_DATE: "%a %b %d",
    PromptElementKind.TIME_24H_SECONDS: "%H:%M:%S",
    PromptElementKind.TIME_12H_SECONDS: "%I:%M:%S",
    PromptElementKind.TIME_AMPM: "%I:%M %p",
    PromptElementKind.TIME_24H_SHORT: "%H:%M",
}


class TimeResolver(BaseResolver):
    resolver_id = "time"
    name = "Time"
    description = "Current local time through a fixed or custom strftime pattern"
    kinds = tuple(TIME_PATTERNS) + (PromptElementKind.CUSTOM_STRFTIME,)

    def resolve(self, element: PromptElement) -> ResolvedFragment:
        if element.kind == PromptElementKind.CUSTOM_STRFTIME:
            return self.format_time(element.argument)
        return self.format_time(TIME_PATTERNS[element.kind])

    def format_time(self, pattern) -> ResolvedFragment:
        try:
            moment = self.system.localtime(self.system.now())
        except OSError as exc:
            return self.fail("!TIME!", exc)
        except OverflowError:
            return self.fail("!TIME!")

        try:
            text = time.strftime(pattern, moment)
        except (ValueError, TypeError) as exc:
            logger.debug("strftime rejected %r: %s", pattern, exc)
            return Failed(diagnostics.STRFTIME)

        if not text or len(os.fsencode(text)) >= self.settings.MAX_STRFTIME_SIZE:
            return Failed(diagnostics.STRFTIME)
        return Owned(text)
