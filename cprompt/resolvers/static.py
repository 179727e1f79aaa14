# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""Static resolvers — Literals, whitespace, bell and the privilege marker."""

from cprompt.protocols.elements import PromptElementKind
from cprompt.protocols.fragments import Borrowed
from cprompt.resolvers.base import BaseResolver

CONSTANTS = {
    PromptElementKind.SPACE: " ",
    PromptElementKind.BELL: "\a",  # bash \a
}

DEFAULT_MARKERS = ("#", "$")


class LiteralResolver(BaseResolver):
    resolver_id = "literal"
    name = "Literal"
    description = "Emits the element argument unchanged"
    kinds = (PromptElementKind.LITERAL,)

    def resolve(self, element):
        text = element.argument if isinstance(element.argument, str) else ""
        return Borrowed(text)


class ConstantResolver(BaseResolver):
    resolver_id = "constant"
    name = "Constant"
    description = "Fixed characters: space and ASCII bell"
    kinds = tuple(CONSTANTS)

    def resolve(self, element):
        return Borrowed(CONSTANTS[element.kind])


class PrivilegeResolver(BaseResolver):
    resolver_id = "privilege"
    name = "Privilege Marker"
    description = "# when the effective uid is root, $ otherwise"
    kinds = (PromptElementKind.PRIVILEGE_MARKER,)

    def resolve(self, element):
        markers = element.argument
        if not isinstance(markers, tuple) or len(markers) != 2:
            markers = DEFAULT_MARKERS
        root_marker, user_marker = markers
        return Borrowed(root_marker if self.system.geteuid() == 0 else user_marker)
