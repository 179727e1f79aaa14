# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
User configuration for cprompt.

Edit PROMPT to change the prompt: list the elements in display order.
The default mimics the Gentoo Linux bash prompt for non-root users:

    user@host ~/dir $
"""

from cprompt.kernel.catalog import PromptCatalog
from cprompt.protocols.elements import PromptElement, PromptElementKind as K, element

PROMPT = PromptCatalog([
    PromptElement.literal("\033[1;32m"),
    element(K.USERNAME),
    PromptElement.literal("@"),
    element(K.HOSTNAME_SHORT),
    PromptElement.literal("\033[1;34m"),
    element(K.SPACE),
    element(K.CWD_TILDE),
    element(K.SPACE),
    element(K.PRIVILEGE_MARKER),
    PromptElement.literal("\033[0m"),
    element(K.SPACE),
])
