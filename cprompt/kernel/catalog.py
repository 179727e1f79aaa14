# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Prompt Catalog — The fixed, ordered element list.

Order is display order. The catalog is built once from the user
configuration and never mutated.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from cprompt.protocols.elements import PromptElement, PromptElementKind


class PromptCatalog:
    """Immutable ordered sequence of PromptElement."""

    def __init__(self, elements: Iterable[PromptElement]) -> None:
        self._elements: Tuple[PromptElement, ...] = tuple(elements)

    @property
    def elements(self) -> Tuple[PromptElement, ...]:
        return self._elements

    def kinds(self) -> Tuple[PromptElementKind, ...]:
        return tuple(e.kind for e in self._elements)

    def __iter__(self) -> Iterator[PromptElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> PromptElement:
        return self._elements[index]

    def __repr__(self) -> str:
        return f"PromptCatalog({len(self._elements)} elements)"
