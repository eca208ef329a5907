"""Remove text nodes left empty by annotation removal."""

from __future__ import annotations

import logging

from .node import Text
from .types import Parent

logger = logging.getLogger(__name__)


def prune_if_empty(parent: Parent, node: Text) -> bool:
    """Remove ``node`` from ``parent`` when its value is empty.

    The node is located by identity, never by equality.

    Args:
        parent: Parent holding the text node.
        node: Text node whose annotation was removed.

    Returns:
        ``True`` if the node was removed.
    """

    if node.value:
        return False

    for position, child in enumerate(parent.children):
        if child is node:
            del parent.children[position]
            logger.debug(f"Pruned empty text node at index {position}")
            return True

    return False
