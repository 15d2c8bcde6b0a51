"""
Page - Pydantic model for a document page.

Each page owns its own element tree (top-level list of PageElement).
No element is shared across pages.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from .base import PageElement, assign_unique_ids, new_id


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


class Page(BaseModel):
    """
    A single page within a document.

    Serialization format:
    {
        "id": "uuid",
        "title": "Home",
        "elements": [...],
        "createdAt": "2024-01-01T00:00:00+00:00",
        "updatedAt": "2024-01-01T00:00:00+00:00"
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
    )

    id: str = Field(default_factory=new_id)
    title: str = Field(default='Untitled')
    elements: list[PageElement] = Field(default_factory=list)
    created_at: str = Field(default_factory=utc_now, alias='createdAt')
    updated_at: str = Field(default_factory=utc_now, alias='updatedAt')

    def touch(self) -> None:
        """Mark the page as modified now."""
        self.updated_at = utc_now()

    def apply_updates(self, updates: dict[str, Any], reserved: Iterable[str] = ()) -> None:
        """
        Merge partial fields into this page in place.

        The identity and creation time are never changed. Elements whose ids
        collide with ``reserved`` or with each other get fresh ids.

        Args:
            updates: Partial field values (snake_case or camelCase keys)
            reserved: Element ids used on other pages of the document
        """
        data = self.model_dump(by_alias=True)
        for key, value in updates.items():
            if key in ('id', 'created_at', 'createdAt'):
                continue
            field = type(self).model_fields.get(key)
            data[field.alias if field is not None and field.alias else key] = copy.deepcopy(value)
        merged = Page.model_validate(data)
        assign_unique_ids(merged.elements, set(reserved))
        self.title = merged.title
        self.elements = merged.elements
        self.touch()

    def to_api_dict(self, *, include_elements: bool = True) -> dict[str, Any]:
        """
        Convert to API response dictionary.

        Args:
            include_elements: If False, replaces the element tree by a count

        Returns:
            Dict with camelCase keys
        """
        data = self.model_dump(by_alias=True, mode='json')
        if not include_elements:
            data['elementCount'] = len(data.pop('elements'))
        return data

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'Page':
        """Create a Page from an API dictionary."""
        return cls.model_validate(data)
