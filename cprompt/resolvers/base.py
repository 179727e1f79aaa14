# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
BaseResolver — Abstract base class for all element resolvers.

Every resolver handles one or more element kinds and turns an element
into exactly one ResolvedFragment. Resolvers only read from the System;
they never raise for OS failures, they return a diagnostic fragment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from cprompt.core.config import PromptSettings, settings as default_settings
from cprompt.kernel.system import System
from cprompt.protocols.elements import PromptElement, PromptElementKind
from cprompt.protocols.fragments import Failed, ResolvedFragment
from cprompt.resolvers.diagnostics import format_error


class BaseResolver(ABC):
    """
    Abstract base class for all resolvers.

    Subclasses set class-level attributes and implement resolve().
    """

    resolver_id: str = ""
    name: str = ""
    description: str = ""
    kinds: Tuple[PromptElementKind, ...] = ()

    def __init__(self, system: System, settings: Optional[PromptSettings] = None) -> None:
        self.system = system
        self.settings = settings or default_settings

    @abstractmethod
    def resolve(self, element: PromptElement) -> ResolvedFragment:
        """Produce the fragment for one element of a handled kind."""
        ...

    def fail(self, default: str, exc: Optional[OSError] = None) -> Failed:
        """Route a failed OS call through the shared error formatter."""
        code = exc.errno if exc is not None else None
        return format_error(default, code, self.system.error_name)

    def get_info(self) -> Dict[str, Any]:
        """Return resolver metadata for registry listing."""
        return {
            "resolver_id": self.resolver_id,
            "name": self.name,
            "description": self.description,
            "kinds": [kind.value for kind in self.kinds],
        }
