"""Snapshot-based undo/redo history.

Each entry is a full, independent copy of the page list; there are no
diffs or patches.
"""

import logging
from typing import Optional

from .elements import Page

logger = logging.getLogger(__name__)


def clone_pages(pages: list[Page]) -> list[Page]:
    """Deep copy a page list so it shares no mutable state with the original."""
    return [page.model_copy(deep=True) for page in pages]


class HistoryManager:
    """
    Two stacks of document snapshots.

    ``past`` holds the states to return to on undo (most recent last).
    ``future`` holds the states undone so far (next redo first).

    The past stack is bounded by ``limit``; when a push exceeds it the oldest
    snapshot is dropped. A limit of 0 disables history entirely.
    """

    def __init__(self, limit: int = 100):
        if limit < 0:
            raise ValueError(f"History limit must be >= 0, got {limit}")
        self.limit = limit
        self.past: list[list[Page]] = []
        self.future: list[list[Page]] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()

    def _push_past(self, pages: list[Page]) -> None:
        if self.limit == 0:
            return
        self.past.append(pages)
        overflow = len(self.past) - self.limit
        if overflow > 0:
            del self.past[:overflow]
            logger.debug("History limit %d reached, dropped %d snapshot(s)", self.limit, overflow)

    def checkpoint(self, pages: list[Page]) -> None:
        """Push a clone of the given pages onto past and clear future."""
        self.push(clone_pages(pages))

    def push(self, snapshot: list[Page]) -> None:
        """Push an already cloned snapshot onto past and clear future."""
        self._push_past(snapshot)
        self.future.clear()

    def undo(self, current: list[Page]) -> Optional[list[Page]]:
        """
        Step back one snapshot.

        Args:
            current: The live page list, moved onto the future stack

        Returns:
            The snapshot to install, or None if there is nothing to undo
        """
        if not self.past:
            return None
        previous = self.past.pop()
        self.future.insert(0, current)
        return previous

    def redo(self, current: list[Page]) -> Optional[list[Page]]:
        """
        Step forward one snapshot.

        Args:
            current: The live page list, moved onto the past stack

        Returns:
            The snapshot to install, or None if there is nothing to redo
        """
        if not self.future:
            return None
        following = self.future.pop(0)
        self._push_past(current)
        return following
