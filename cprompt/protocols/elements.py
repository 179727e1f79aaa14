# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Prompt Element Schema — The catalog vocabulary.

A prompt is an ordered sequence of PromptElement instances. Each element
carries a kind tag and an optional argument whose meaning depends on the
kind:

  - LITERAL: the text to emit
  - CUSTOM_STRFTIME: a strftime pattern
  - CWD_TILDE / CWD_TILDE_BASENAME: what $HOME is abbreviated to (default "~")
  - PRIVILEGE_MARKER: a (root, other) pair (default ("#", "$"))

Elements are frozen once built.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field


class PromptElementKind(str, Enum):
    """Closed set of element tags."""

    LITERAL = "literal"
    SPACE = "space"
    BELL = "bell"
    HOSTNAME_SHORT = "hostname_short"
    HOSTNAME_FULL = "hostname_full"
    TTY_BASENAME = "tty_basename"
    PARENT_PROCESS_NAME = "parent_process_name"
    WEEKDAY_DATE = "weekday_date"
    CUSTOM_STRFTIME = "custom_strftime"
    TIME_24H_SECONDS = "time_24h_seconds"
    TIME_12H_SECONDS = "time_12h_seconds"
    TIME_AMPM = "time_ampm"
    TIME_24H_SHORT = "time_24h_short"
    USERNAME = "username"
    CWD_TILDE = "cwd_tilde"
    CWD_TILDE_BASENAME = "cwd_tilde_basename"
    PRIVILEGE_MARKER = "privilege_marker"


ElementArgument = Union[str, Tuple[str, str]]


class PromptElement(BaseModel):
    """One entry of the prompt catalog."""

    kind: PromptElementKind = Field(..., description="Element tag")
    argument: Optional[ElementArgument] = Field(
        default=None,
        description="Kind-specific argument, see module docstring",
    )

    model_config = {"frozen": True}

    @classmethod
    def literal(cls, text: str) -> "PromptElement":
        return cls(kind=PromptElementKind.LITERAL, argument=text)

    @classmethod
    def strftime(cls, pattern: str) -> "PromptElement":
        return cls(kind=PromptElementKind.CUSTOM_STRFTIME, argument=pattern)


def element(
    kind: PromptElementKind, argument: Optional[ElementArgument] = None
) -> PromptElement:
    """Shorthand used by catalog declarations."""
    return PromptElement(kind=kind, argument=argument)
