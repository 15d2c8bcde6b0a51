"""Element tree operations.

All lookups are a depth-first, pre-order walk that stops at the first node
whose id matches. Element ids are unique within a document, so the first
match is the only match.

Every function works on a plain ``list[PageElement]`` (a page's top-level
elements or any node's children) and mutates it in place.
"""

from typing import Any, Callable, Iterable, Iterator, Optional

from .elements import PageElement, Position, Size


def iter_elements(elements: list[PageElement]) -> Iterator[PageElement]:
    """Yield every element of the tree in pre-order."""
    for element in elements:
        yield element
        yield from iter_elements(element.children)


def collect_ids(elements: list[PageElement]) -> list[str]:
    """Return the ids of all elements of the tree in pre-order."""
    return [element.id for element in iter_elements(elements)]


def find_element(elements: list[PageElement], element_id: str) -> Optional[PageElement]:
    """
    Find an element anywhere in the tree.

    Args:
        elements: Top-level element list to search
        element_id: Id of the element to find

    Returns:
        The matching element (not a copy) or None
    """
    for element in iter_elements(elements):
        if element.id == element_id:
            return element
    return None


def _locate(
    elements: list[PageElement], element_id: str
) -> Optional[tuple[list[PageElement], int]]:
    """Return the owning list and index of the matching element."""
    for i, element in enumerate(elements):
        if element.id == element_id:
            return elements, i
        if element.children:
            found = _locate(element.children, element_id)
            if found is not None:
                return found
    return None


def replace_element(
    elements: list[PageElement],
    element_id: str,
    transform: Callable[[PageElement], PageElement],
) -> bool:
    """
    Replace the matching element by ``transform(element)``.

    Returns:
        True if the element was found
    """
    found = _locate(elements, element_id)
    if found is None:
        return False
    owner, index = found
    owner[index] = transform(owner[index])
    return True


def update_element(
    elements: list[PageElement],
    element_id: str,
    updates: dict[str, Any],
    reserved: Iterable[str] = (),
) -> bool:
    """
    Merge partial fields into the matching element at any depth.

    Incoming children whose ids collide with ``reserved`` get fresh ids.
    """
    return replace_element(
        elements, element_id, lambda element: element.merged(updates, reserved)
    )


def remove_element(elements: list[PageElement], element_id: str) -> Optional[PageElement]:
    """
    Remove the matching element and its whole subtree.

    Returns:
        The detached element, or None if not found
    """
    found = _locate(elements, element_id)
    if found is None:
        return None
    owner, index = found
    return owner.pop(index)


def move_element(elements: list[PageElement], element_id: str, position: Any) -> bool:
    """Set only the position of the matching element."""
    element = find_element(elements, element_id)
    if element is None:
        return False
    element.position = Position.model_validate(_plain(position))
    return True


def resize_element(elements: list[PageElement], element_id: str, size: Any) -> bool:
    """Set only the size of the matching element."""
    element = find_element(elements, element_id)
    if element is None:
        return False
    element.size = Size.model_validate(_plain(size))
    return True


def update_element_props(
    elements: list[PageElement], element_id: str, props: dict[str, Any]
) -> bool:
    """Shallow-merge into the matching element's props."""
    return replace_element(
        elements,
        element_id,
        lambda element: element.merged({'props': {**element.props, **props}}),
    )


def _plain(value: Any) -> Any:
    # Validate from a dump so the stored model never aliases the caller's
    if isinstance(value, (Position, Size)):
        return value.model_dump()
    return value
