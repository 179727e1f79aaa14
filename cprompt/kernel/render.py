# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Render Pass — The fragments of one prompt render and their release.

A RenderPass is created once per run, filled in catalog order, read for
output, then released: every owned fragment exactly once, no borrowed
fragment ever.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from cprompt.protocols.fragments import ResolvedFragment

logger = logging.getLogger("cprompt.render")


class RenderPass:
    """Ordered fragments produced from one catalog."""

    def __init__(self, fragments: List[ResolvedFragment]) -> None:
        self._fragments = fragments
        self._released = False

    @property
    def fragments(self) -> List[ResolvedFragment]:
        return list(self._fragments)

    @property
    def text(self) -> str:
        """Fragments concatenated with no separator."""
        return "".join(f.text for f in self._fragments)

    @property
    def line(self) -> str:
        """The output line: text plus a single newline."""
        return self.text + "\n"

    @property
    def owned_count(self) -> int:
        return sum(1 for f in self._fragments if f.owned)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> int:
        """Release every owned fragment. Returns how many were released."""
        if self._released:
            return 0
        count = release_fragments(self._fragments)
        self._released = True
        logger.debug("Released %d of %d fragments", count, len(self._fragments))
        return count

    def __iter__(self) -> Iterator[ResolvedFragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __enter__(self) -> "RenderPass":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def release_fragments(fragments: List[ResolvedFragment]) -> int:
    """Release the owned fragments of `fragments`, leaving borrowed ones alone."""
    count = 0
    for fragment in fragments:
        if fragment.owned:
            fragment.release()
            count += 1
    return count
