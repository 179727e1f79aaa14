# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Error types — Programming errors around the fragment contract.

Resolution failures never raise; they become diagnostic fragments.
These exceptions are reserved for misuse of the engine itself.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PromptError(Exception):
    """Base error with a stable code and message."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class FragmentReleaseError(PromptError):
    def __init__(self, text: str, reason: str):
        super().__init__(
            code="FRAGMENT_RELEASE",
            message=f"Cannot release fragment {text!r}: {reason}",
            details={"text": text, "reason": reason},
        )


class UnknownElementKindError(PromptError):
    def __init__(self, kind: Any):
        super().__init__(
            code="UNKNOWN_ELEMENT_KIND",
            message=f"No resolver registered for element kind '{kind}'",
            details={"kind": str(kind)},
        )
