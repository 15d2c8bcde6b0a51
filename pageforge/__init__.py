"""
Pageforge - document core for a visual page editor.

Pages hold trees of positioned, resizable elements. The PageRepository
provides mutation, clipboard and undo/redo commands over them.
"""

from .clipboard import Clipboard, regenerate_ids
from .elements import ElementType, Page, PageElement, Position, Size
from .exceptions import PageforgeError, SessionNotFoundError
from .history import HistoryManager
from .media import MediaLibrary, UploadedMedia
from .repository import PageRepository
from .selection import SelectionTracker

__all__ = [
    # Models
    "ElementType",
    "Page",
    "PageElement",
    "Position",
    "Size",
    "UploadedMedia",
    # Components
    "Clipboard",
    "HistoryManager",
    "MediaLibrary",
    "SelectionTracker",
    "PageRepository",
    "regenerate_ids",
    # Errors
    "PageforgeError",
    "SessionNotFoundError",
]
