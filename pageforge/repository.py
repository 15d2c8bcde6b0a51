"""
PageRepository - the editor document state and its commands.

Owns the page list, the active page pointer, the selection, the clipboard,
the undo/redo history and the media library. Commands are total over absent
targets: an unknown id, an empty clipboard or an exhausted history stack is
a silent no-op (no state change, no history entry). Each command returns a
boolean (or the created object / None) so callers can tell what happened.

Committing commands checkpoint the document *before* applying their change,
so the top of the undo stack is always the state ``undo()`` returns to.
``move_element`` and ``resize_element`` are live updates and never
checkpoint; the canvas calls ``save_history_state()`` once per drag gesture.

The repository is single-threaded: callers must serialize commands.
"""

import logging
from typing import Any, Callable, Optional

from .clipboard import Clipboard, regenerate_ids
from .config import settings
from .elements import Page, PageElement
from .history import HistoryManager, clone_pages
from .media import MediaLibrary, UploadedMedia
from .selection import SelectionTracker
from . import tree

logger = logging.getLogger(__name__)


class PageRepository:
    """In-memory editor document: pages, selection, clipboard and history."""

    def __init__(
        self,
        history_limit: Optional[int] = None,
        paste_offset: Optional[float] = None,
    ):
        self.pages: list[Page] = []
        self.current_page_id: Optional[str] = None
        self.is_dragging: bool = False
        self.selection = SelectionTracker()
        self.history = HistoryManager(
            settings.HISTORY_LIMIT if history_limit is None else history_limit
        )
        self._clipboard = Clipboard(
            settings.PASTE_OFFSET if paste_offset is None else paste_offset
        )
        self.media = MediaLibrary()

    # --- Read state ---

    @property
    def selected_element_id(self) -> Optional[str]:
        return self.selection.selected_id

    @property
    def clipboard(self) -> Optional[PageElement]:
        return self._clipboard.content

    @property
    def has_clipboard(self) -> bool:
        return not self._clipboard.is_empty

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def current_page(self) -> Optional[Page]:
        if self.current_page_id is None:
            return None
        return self.get_page(self.current_page_id)

    def get_page(self, page_id: str) -> Optional[Page]:
        for page in self.pages:
            if page.id == page_id:
                return page
        return None

    def find_element(self, element_id: str) -> Optional[PageElement]:
        """Find an element on the current page (returns the live node)."""
        page = self.current_page
        if page is None:
            return None
        return tree.find_element(page.elements, element_id)

    # --- History ---

    def save_history_state(self) -> None:
        """Checkpoint the current document and clear the redo stack."""
        self.history.checkpoint(self.pages)

    def undo(self) -> bool:
        restored = self.history.undo(self.pages)
        if restored is None:
            logger.debug("Nothing to undo")
            return False
        self._install(restored)
        return True

    def redo(self) -> bool:
        restored = self.history.redo(self.pages)
        if restored is None:
            logger.debug("Nothing to redo")
            return False
        self._install(restored)
        return True

    def _install(self, pages: list[Page]) -> None:
        self.pages = pages
        if self.current_page is None:
            self.current_page_id = self.pages[0].id if self.pages else None
        page = self.current_page
        self.selection.clear_unless_in(tree.collect_ids(page.elements) if page else [])

    # --- Page commands ---

    def set_current_page_id(self, page_id: Optional[str]) -> bool:
        """
        Switch the active page and clear the selection.

        Args:
            page_id: Id of an existing page, or None to clear the pointer

        Returns:
            False if the page does not exist (nothing changes)
        """
        if page_id is not None and self.get_page(page_id) is None:
            logger.debug("set_current_page_id: page %s not found", page_id)
            return False
        self.current_page_id = page_id
        self.selection.clear()
        return True

    def add_page(self, title: str) -> Page:
        self.save_history_state()
        page = Page(title=title)
        self.pages.append(page)
        self.current_page_id = page.id
        self.selection.clear()
        logger.debug("Added page %s (%r)", page.id, title)
        return page

    def update_page(self, page_id: str, updates: dict[str, Any]) -> bool:
        page = self.get_page(page_id)
        if page is None:
            logger.debug("update_page: page %s not found", page_id)
            return False
        # Validate against a copy first so a bad payload leaves no checkpoint
        candidate = page.model_copy(deep=True)
        candidate.apply_updates(updates, reserved=self._document_ids(skip=page))
        self.save_history_state()
        self.pages = [candidate if p is page else p for p in self.pages]
        self._drop_stale_selection()
        return True

    def delete_page(self, page_id: str) -> bool:
        page = self.get_page(page_id)
        if page is None:
            logger.debug("delete_page: page %s not found", page_id)
            return False
        self.save_history_state()
        self.pages.remove(page)
        if self.current_page_id == page_id:
            self.current_page_id = self.pages[0].id if self.pages else None
        self.selection.clear()
        logger.debug("Deleted page %s", page_id)
        return True

    # --- Element commands ---

    def add_element(self, data: Any) -> Optional[PageElement]:
        """
        Append a new element to the top level of the current page.

        Fresh ids are assigned to the element and any children it brings,
        whatever ids ``data`` contains.

        Args:
            data: Element fields as a dict or a PageElement

        Returns:
            The added element, or None if there is no current page
        """
        page = self.current_page
        if page is None:
            logger.debug("add_element: no current page")
            return None
        if isinstance(data, PageElement):
            data = data.model_dump(by_alias=True)
        # Fresh ids for the whole subtree keep element ids unique
        element = regenerate_ids(PageElement.model_validate(data))
        self.save_history_state()
        page.elements.append(element)
        page.touch()
        self.selection.select(element.id)
        return element

    def update_element(self, element_id: str, updates: dict[str, Any]) -> bool:
        page = self.current_page
        target = tree.find_element(page.elements, element_id) if page else None
        if target is None:
            logger.debug("update_element: element %s not found", element_id)
            return False
        reserved = self._document_ids() - set(tree.collect_ids([target]))
        self._commit(page, lambda elements: tree.update_element(elements, element_id, updates, reserved))
        self._drop_stale_selection()
        return True

    def delete_element(self, element_id: str) -> bool:
        page = self.current_page
        target = tree.find_element(page.elements, element_id) if page else None
        if target is None:
            logger.debug("delete_element: element %s not found", element_id)
            return False
        removed_ids = tree.collect_ids([target])
        self._commit(page, lambda elements: tree.remove_element(elements, element_id))
        self.selection.clear_if_in(removed_ids)
        return True

    def select_element(self, element_id: Optional[str]) -> None:
        self.selection.select(element_id)

    def move_element(self, element_id: str, position: Any) -> bool:
        """Live position update (no history checkpoint)."""
        page = self.current_page
        if page is None or not tree.move_element(page.elements, element_id, position):
            return False
        page.touch()
        return True

    def resize_element(self, element_id: str, size: Any) -> bool:
        """Live size update (no history checkpoint)."""
        page = self.current_page
        if page is None or not tree.resize_element(page.elements, element_id, size):
            return False
        page.touch()
        return True

    def update_element_props(self, element_id: str, props: dict[str, Any]) -> bool:
        page = self.current_page
        if page is None or tree.find_element(page.elements, element_id) is None:
            logger.debug("update_element_props: element %s not found", element_id)
            return False
        self._commit(page, lambda elements: tree.update_element_props(elements, element_id, props))
        return True

    def _commit(self, page: Page, mutate: Callable[[list[PageElement]], Any]) -> None:
        """
        Apply a tree mutation to a page and checkpoint the prior state.

        The caller has already located the target. The snapshot is pushed
        only after ``mutate`` returns; tree operations validate before they
        assign, so an exception leaves both the page and the history untouched.
        """
        snapshot = clone_pages(self.pages)
        mutate(page.elements)
        self.history.push(snapshot)
        page.touch()

    def set_dragging(self, is_dragging: bool) -> None:
        self.is_dragging = is_dragging

    # --- Clipboard commands ---

    def copy_element(self, element_id: str) -> bool:
        page = self.current_page
        if page is None:
            return False
        return self._clipboard.copy_from(page.elements, element_id)

    def cut_element(self, element_id: str) -> bool:
        if not self.copy_element(element_id):
            return False
        return self.delete_element(element_id)

    def paste_element(self) -> Optional[PageElement]:
        """
        Paste the clipboard onto the top level of the current page.

        Returns:
            The pasted root element, or None if nothing was pasted
        """
        page = self.current_page
        if page is None:
            return None
        pasted = self._clipboard.make_paste()
        if pasted is None:
            logger.debug("paste_element: clipboard is empty")
            return None
        self.save_history_state()
        page.elements.append(pasted)
        page.touch()
        self.selection.select(pasted.id)
        return pasted

    # --- Media commands ---

    def add_media(self, name: str, url: str, content_type: str = 'application/octet-stream',
                  size: int = 0) -> UploadedMedia:
        return self.media.add(name, url, content_type=content_type, size=size)

    def get_media(self, media_id: str) -> Optional[UploadedMedia]:
        return self.media.get(media_id)

    def delete_media(self, media_id: str) -> bool:
        scrubbed = self.media.remove(media_id, self.pages)
        if scrubbed is None:
            return False
        logger.debug("Deleted media %s, scrubbed %d reference(s)", media_id, scrubbed)
        return True

    # --- Serialization ---

    def _document_ids(self, skip: Optional[Page] = None) -> set[str]:
        """All element ids of the document, optionally without one page."""
        return {
            element_id
            for page in self.pages if page is not skip
            for element_id in tree.collect_ids(page.elements)
        }

    def _drop_stale_selection(self) -> None:
        page = self.current_page
        self.selection.clear_unless_in(tree.collect_ids(page.elements) if page else [])

    def to_api_dict(self) -> dict[str, Any]:
        """Serialize the full editor state with camelCase keys."""
        return {
            'pages': [page.to_api_dict() for page in self.pages],
            'currentPageId': self.current_page_id,
            'selectedElementId': self.selected_element_id,
            'isDragging': self.is_dragging,
            'hasClipboard': self.has_clipboard,
            'canUndo': self.can_undo,
            'canRedo': self.can_redo,
            'media': [media.to_api_dict() for media in self.media.items],
        }
