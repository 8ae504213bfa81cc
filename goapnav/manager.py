"""Shared registry of characters currently seen by the AI."""

from __future__ import annotations

import weakref
from typing import Any, ClassVar


class AIManager:
    """Process-wide set of visible characters, held by weak reference."""

    _instance: ClassVar[AIManager | None] = None

    def __init__(self) -> None:
        self._visible: weakref.WeakSet[Any] = weakref.WeakSet()

    @classmethod
    def get(cls) -> AIManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_visible_character(self, actor: Any) -> None:
        """Record `actor` as visible; None is ignored."""
        if actor is not None:
            self._visible.add(actor)

    def remove_visible_character(self, actor: Any) -> None:
        """Forget `actor`; None and unknown actors are ignored."""
        if actor is not None:
            self._visible.discard(actor)

    def visible_characters(self) -> frozenset[Any]:
        """The characters currently recorded as visible and still alive."""
        return frozenset(self._visible)

    def clear(self) -> None:
        """Forget every visible character."""
        self._visible.clear()