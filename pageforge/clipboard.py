"""Single-slot clipboard holding one element subtree."""

from typing import Optional

from .elements import PageElement, new_id
from .tree import find_element


def regenerate_ids(element: PageElement) -> PageElement:
    """
    Return a deep copy of the subtree with a fresh id on every node.

    Structure and all other fields are preserved.
    """
    clone = element.model_copy(deep=True)
    _assign_new_ids(clone)
    return clone


def _assign_new_ids(element: PageElement) -> None:
    element.id = new_id()
    for child in element.children:
        _assign_new_ids(child)


class Clipboard:
    """Holds a structurally independent clone of one element subtree."""

    def __init__(self, paste_offset: float = 10.0):
        self._content: Optional[PageElement] = None
        self.paste_offset = paste_offset

    @property
    def content(self) -> Optional[PageElement]:
        """A copy of the stored subtree; the stored one is never handed out."""
        if self._content is None:
            return None
        return self._content.model_copy(deep=True)

    @property
    def is_empty(self) -> bool:
        return self._content is None

    def copy_from(self, elements: list[PageElement], element_id: str) -> bool:
        """
        Store a deep clone of the matching element.

        Args:
            elements: Element tree to search
            element_id: Id of the element to copy

        Returns:
            True if the element was found and copied
        """
        element = find_element(elements, element_id)
        if element is None:
            return False
        self._content = element.model_copy(deep=True)
        return True

    def make_paste(self) -> Optional[PageElement]:
        """
        Build the subtree to insert on paste.

        Every node gets a fresh id and the root is shifted by the paste
        offset so the copy does not exactly cover its source. The stored
        content is left unchanged, so pasting twice yields distinct ids.

        Returns:
            New element subtree, or None if the clipboard is empty
        """
        if self._content is None:
            return None
        pasted = regenerate_ids(self._content)
        pasted.position = pasted.position.offset(self.paste_offset, self.paste_offset)
        return pasted
