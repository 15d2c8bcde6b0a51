"""Selection tracker: at most one selected element id."""

from typing import Iterable, Optional


class SelectionTracker:
    """Holds the id of the selected element, or None."""

    def __init__(self):
        self._selected_id: Optional[str] = None

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def select(self, element_id: Optional[str]) -> None:
        """Select an element unconditionally (no existence check)."""
        self._selected_id = element_id

    def clear(self) -> None:
        self._selected_id = None

    def clear_if_in(self, element_ids: Iterable[str]) -> bool:
        """
        Clear the selection if it is one of the given ids.

        Returns:
            True if the selection was cleared
        """
        if self._selected_id is not None and self._selected_id in set(element_ids):
            self._selected_id = None
            return True
        return False

    def clear_unless_in(self, element_ids: Iterable[str]) -> bool:
        """
        Clear the selection unless it is one of the given ids.

        Returns:
            True if the selection was cleared
        """
        if self._selected_id is not None and self._selected_id not in set(element_ids):
            self._selected_id = None
            return True
        return False
