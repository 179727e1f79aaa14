# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Resolved Fragments — What a resolver hands back.

Every resolution yields exactly one fragment. The variant decides who
is responsible for the text:

  - Owned:    produced for this render; the holder releases it once
  - Borrowed: process-lifetime constant; never released
  - Failed:   a diagnostic token; owned or borrowed depending on whether
              the token was built for this failure or is a constant

HomeDirectory is the internal four-way result of the home lookup used by
the cwd resolvers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from cprompt.core.errors import FragmentReleaseError


@dataclass
class ResolvedFragment(ABC):
    """Base for the three fragment variants."""

    text: str
    _released: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    @abstractmethod
    def owned(self) -> bool:
        """Whether the holder must release the text."""

    @property
    def failed(self) -> bool:
        return False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Mark the text as released. Only valid once, and only for owned text."""
        if not self.owned:
            raise FragmentReleaseError(self.text, "borrowed text is never released")
        if self._released:
            raise FragmentReleaseError(self.text, "already released")
        self._released = True


@dataclass
class Owned(ResolvedFragment):
    @property
    def owned(self) -> bool:
        return True


@dataclass
class Borrowed(ResolvedFragment):
    @property
    def owned(self) -> bool:
        return False


@dataclass
class Failed(ResolvedFragment):
    diagnostic_owned: bool = False

    @property
    def owned(self) -> bool:
        return self.diagnostic_owned

    @property
    def failed(self) -> bool:
        return True


# ── Home directory lookup ───────────────────────────────────────


class HomeDirOutcome(str, Enum):
    BORROWED_VALUE = "borrowed_value"
    BORROWED_ERROR = "borrowed_error"
    OWNED_VALUE = "owned_value"
    OWNED_ERROR = "owned_error"


@dataclass(frozen=True)
class HomeDirectory:
    """Home directory text plus whether it is an error and who owns it."""

    text: str
    outcome: HomeDirOutcome

    @classmethod
    def of(cls, text: str, *, is_error: bool, owned: bool) -> "HomeDirectory":
        if is_error:
            outcome = HomeDirOutcome.OWNED_ERROR if owned else HomeDirOutcome.BORROWED_ERROR
        else:
            outcome = HomeDirOutcome.OWNED_VALUE if owned else HomeDirOutcome.BORROWED_VALUE
        return cls(text=text, outcome=outcome)

    @classmethod
    def from_failure(cls, fragment: ResolvedFragment) -> "HomeDirectory":
        return cls.of(fragment.text, is_error=True, owned=fragment.owned)

    @property
    def is_error(self) -> bool:
        return self.outcome in (HomeDirOutcome.BORROWED_ERROR, HomeDirOutcome.OWNED_ERROR)

    @property
    def owned(self) -> bool:
        return self.outcome in (HomeDirOutcome.OWNED_VALUE, HomeDirOutcome.OWNED_ERROR)

    def to_failure(self) -> Failed:
        """Turn an error outcome into the fragment the cwd resolver returns."""
        return Failed(self.text, diagnostic_owned=self.owned)
