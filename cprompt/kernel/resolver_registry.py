# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Resolver Registry — Maps every element kind to the resolver that owns it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

from cprompt.protocols.elements import PromptElementKind
from cprompt.resolvers.base import BaseResolver

logger = logging.getLogger("cprompt.resolver_registry")


class ResolverRegistry:
    """
    Kind → resolver lookup. A resolver is registered under each of its kinds.
    """

    def __init__(self) -> None:
        self._by_kind: Dict[PromptElementKind, BaseResolver] = {}

    # ── Registration ────────────────────────────────────────────

    def register(self, resolver: BaseResolver) -> None:
        """Register a resolver for all kinds it declares."""
        for kind in resolver.kinds:
            previous = self._by_kind.get(kind)
            if previous is not None and previous is not resolver:
                logger.warning(
                    "Kind %s reassigned from %s to %s",
                    kind.value, previous.resolver_id, resolver.resolver_id,
                )
            self._by_kind[kind] = resolver
        logger.debug(
            "Registered resolver: %s (%s)",
            resolver.resolver_id, ", ".join(k.value for k in resolver.kinds),
        )

    # ── Lookup ──────────────────────────────────────────────────

    def get(self, kind: PromptElementKind) -> Optional[BaseResolver]:
        return self._by_kind.get(kind)

    def missing_kinds(self) -> Set[PromptElementKind]:
        """Kinds with no registered resolver."""
        return set(PromptElementKind) - set(self._by_kind)

    # ── Listing ─────────────────────────────────────────────────

    def list_all(self) -> List[Dict[str, Any]]:
        """List each distinct resolver once."""
        seen: Dict[str, Dict[str, Any]] = {}
        for resolver in self._by_kind.values():
            seen.setdefault(resolver.resolver_id, resolver.get_info())
        return list(seen.values())
