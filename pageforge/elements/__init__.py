"""
Pageforge Element Models

Pydantic models for pages and their element trees.

Hierarchy:
    Page
    └── elements: list[PageElement]
        └── children: list[PageElement] (recursive)

Element configuration (props, style) is opaque to the core.
"""

from .base import ElementType, PageElement, Position, Size, assign_unique_ids, new_id
from .page import Page, utc_now

__all__ = [
    'ElementType',
    'PageElement',
    'Position',
    'Size',
    'Page',
    'assign_unique_ids',
    'new_id',
    'utc_now',
]
