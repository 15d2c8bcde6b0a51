"""
PageElement - Pydantic model for a node in a page's element tree.

Provides the shared properties of every element:
- Identity: id, type
- Geometry: position (x, y), size (width, height)
- Configuration: props, style (opaque key-value bags)
- Editing state: locked
- Hierarchy: children (owned exclusively, no back-references)

Uses Pydantic v2 with camelCase aliases for JS serialization compatibility.
"""

import copy
from enum import Enum
from typing import Any, Iterable, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_id() -> str:
    """Generate a fresh element or page identity."""
    return str(uuid.uuid4())


def assign_unique_ids(elements: list['PageElement'], taken: set[str]) -> None:
    """
    Give a fresh id to every node whose id is already taken.

    Walks the trees in pre-order and adds each kept or assigned id to
    ``taken``, so duplicates inside ``elements`` are resolved too.
    """
    for element in elements:
        if element.id in taken:
            element.id = new_id()
        taken.add(element.id)
        assign_unique_ids(element.children, taken)


class ElementType(str, Enum):
    """Element kinds supplied by the component palette.

    The list is not closed: any string is accepted as an element type.
    """
    CONTAINER = "container"
    TEXT = "text"
    HEADING = "heading"
    BUTTON = "button"
    IMAGE = "image"
    INPUT = "input"
    FORM = "form"
    TABLE = "table"
    CHART = "chart"
    DIVIDER = "divider"
    SPACER = "spacer"
    CUSTOM = "custom"


class Position(BaseModel):
    """Element position relative to its page origin."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> 'Position':
        return Position(x=self.x + dx, y=self.y + dy)


class Size(BaseModel):
    """Element dimensions."""
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class PageElement(BaseModel):
    """
    A positioned, resizable node of a page's element tree.

    Serialization format:
    {
        "id": "uuid",
        "type": "text",
        "props": {"label": "Hello"},
        "position": {"x": 0, "y": 0},
        "size": {"width": 200, "height": 40},
        "locked": false,
        "children": [...],
        "style": {},
        "objectReference": null
    }
    """

    model_config = ConfigDict(
        # Allow both snake_case and camelCase input
        populate_by_name=True,
        # Don't validate on assignment for performance
        validate_assignment=False,
        # Allow extra fields for forward compatibility
        extra='ignore',
    )

    id: str = Field(default_factory=new_id)
    type: str = Field(default=ElementType.CONTAINER.value)

    # Opaque configuration, never interpreted by the core
    props: dict[str, Any] = Field(default_factory=dict)
    style: dict[str, Any] = Field(default_factory=dict)

    position: Position = Field(default_factory=lambda: Position(x=0, y=0))
    size: Size = Field(default_factory=lambda: Size(width=200, height=40))
    locked: bool = Field(default=False)

    children: list['PageElement'] = Field(default_factory=list)

    # Optional binding to a data object (e.g. "Customer__c")
    object_reference: Optional[str] = Field(default=None, alias='objectReference')

    @field_validator('type', mode='before')
    @classmethod
    def _type_by_value(cls, value: Any) -> Any:
        """Store enum members by value (e.g., "text" not "ElementType.TEXT")."""
        if isinstance(value, Enum):
            return value.value
        return value

    @classmethod
    def field_key(cls, key: str) -> str:
        """Map a snake_case field name to its serialization alias."""
        field = cls.model_fields.get(key)
        if field is not None and field.alias:
            return field.alias
        return key

    def merged(self, updates: dict[str, Any], reserved: Iterable[str] = ()) -> 'PageElement':
        """
        Return a copy with the given fields merged in.

        The identity is never changed; an ``id`` key in updates is ignored.
        Descendants whose ids collide with ``reserved``, with this element or
        with each other get fresh ids.

        Args:
            updates: Partial field values (snake_case or camelCase keys)
            reserved: Ids used elsewhere in the document

        Returns:
            New PageElement instance
        """
        data = self.model_dump(by_alias=True)
        for key, value in updates.items():
            if key == 'id':
                continue
            if isinstance(value, BaseModel):
                value = value.model_dump(by_alias=True)
            else:
                value = copy.deepcopy(value)
            data[self.field_key(key)] = value
        merged = PageElement.model_validate(data)
        assign_unique_ids(merged.children, set(reserved) | {merged.id})
        return merged

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to API response dictionary with camelCase keys."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'PageElement':
        """Create an element (and its subtree) from an API dictionary."""
        return cls.model_validate(data)
