# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Resolver Engine — Turns a catalog into a RenderPass.

Each element is resolved independently, in catalog order, by the
resolver registered for its kind. A failure in one element only ever
affects that element's fragment.
"""

from __future__ import annotations

import logging
from typing import Optional

from cprompt.core.config import PromptSettings, settings as default_settings
from cprompt.core.errors import UnknownElementKindError
from cprompt.kernel.catalog import PromptCatalog
from cprompt.kernel.render import RenderPass
from cprompt.kernel.resolver_registry import ResolverRegistry
from cprompt.kernel.system import PosixSystem, System
from cprompt.protocols.elements import PromptElement
from cprompt.protocols.fragments import Failed, ResolvedFragment
from cprompt.resolvers import diagnostics
from cprompt.resolvers.clock import TimeResolver
from cprompt.resolvers.cwd import CwdResolver
from cprompt.resolvers.host import HostnameResolver
from cprompt.resolvers.process import ParentProcessResolver
from cprompt.resolvers.static import ConstantResolver, LiteralResolver, PrivilegeResolver
from cprompt.resolvers.terminal import TtyResolver
from cprompt.resolvers.user import UsernameResolver

logger = logging.getLogger("cprompt.engine")

BUILTIN_RESOLVERS = (
    LiteralResolver,
    ConstantResolver,
    PrivilegeResolver,
    TimeResolver,
    HostnameResolver,
    TtyResolver,
    ParentProcessResolver,
    UsernameResolver,
    CwdResolver,
)


class ResolverEngine:
    """Dispatches elements to resolvers by kind."""

    def __init__(self, registry: ResolverRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ResolverRegistry:
        return self._registry

    def resolve(self, element: PromptElement) -> ResolvedFragment:
        """Resolve one element to exactly one fragment."""
        resolver = self._registry.get(element.kind)
        if resolver is None:
            raise UnknownElementKindError(element.kind)
        try:
            fragment = resolver.resolve(element)
        except MemoryError:
            fragment = Failed(diagnostics.MALLOC)
        if fragment.failed:
            logger.debug(
                "Element %s degraded to %s", element.kind.value, fragment.text,
                extra={"kind": element.kind.value, "token": fragment.text},
            )
        return fragment

    def explode(self, catalog: PromptCatalog) -> RenderPass:
        """Resolve every element of `catalog`, left to right."""
        return RenderPass([self.resolve(element) for element in catalog])


def build_engine(
    system: Optional[System] = None,
    settings: Optional[PromptSettings] = None,
) -> ResolverEngine:
    """Engine with every built-in resolver registered."""
    system = system or PosixSystem()
    settings = settings or default_settings
    registry = ResolverRegistry()
    for resolver_cls in BUILTIN_RESOLVERS:
        registry.register(resolver_cls(system, settings))
    return ResolverEngine(registry)


def render_prompt(catalog: PromptCatalog, engine: ResolverEngine) -> str:
    """Render `catalog` to its output line, releasing owned fragments afterwards."""
    with engine.explode(catalog) as render_pass:
        return render_pass.line
