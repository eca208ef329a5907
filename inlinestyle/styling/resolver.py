"""Choose the element that receives a parsed annotation."""

from __future__ import annotations

from .node import Element
from .types import Parent


def resolve_target(parent: Parent, original_index: int) -> Element | None:
    """Choose the element that receives a parsed annotation.

    The child list is inspected as it stands after the annotated text node
    may have been pruned. Positions before ``original_index`` are not
    affected by that removal.

    Rules, first match wins:

    1. The sibling right before the text node when it is an element.
    2. The only remaining child when it is an element.
    3. The parent when it is an element.

    Args:
        parent: Parent of the annotated text node.
        original_index: Index of the text node when it was visited.

    Returns:
        The target element or ``None``.
    """

    children = parent.children

    if original_index > 0 and original_index - 1 < len(children):
        previous = children[original_index - 1]
        if isinstance(previous, Element):
            return previous

    if len(children) == 1 and isinstance(children[0], Element):
        return children[0]

    if isinstance(parent, Element):
        return parent

    return None
