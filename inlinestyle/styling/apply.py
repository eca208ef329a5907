"""Apply inline annotations across a document tree."""

from __future__ import annotations

import logging

from .merger import merge_attributes
from .node import Element, Root, Text
from .options import DEFAULT_OPTIONS, StylingOptions
from .parse_annotation import match_annotation, parse_annotation
from .pruner import prune_if_empty
from .resolver import resolve_target
from .types import Node, Parent

logger = logging.getLogger(__name__)


def style_text_node(
    node: Text,
    parent: Parent,
    index: int,
    options: StylingOptions | None = None,
) -> bool:
    """Consume the annotation at the start of a text node.

    The annotation is removed from the value, the remaining text is
    trimmed, the node is pruned if it became empty and the parsed data is
    merged into the resolved target, if any.

    Args:
        node: Text node being visited.
        parent: Parent of ``node``.
        index: Position of ``node`` in ``parent.children`` when visited.
        options: Styling options.

    Returns:
        ``True`` if an annotation was found and consumed.
    """

    options = options or DEFAULT_OPTIONS

    match = match_annotation(node.value, options)
    if match is None:
        return False

    parsed = parse_annotation(match.group(1), options)

    node.value = node.value[match.end():].strip()
    prune_if_empty(parent, node)

    target = resolve_target(parent, index)
    if target is None:
        logger.debug(f"No target for annotation {match.group(0)!r}")
        return True

    logger.debug(f"Applying annotation {match.group(0)!r} to <{target.tag}>")
    merge_attributes(target, parsed)
    return True


def _visit_children(parent: Parent, options: StylingOptions) -> None:
    """Visit the children of ``parent`` in document order.

    The child list is read live. When the visited text node was removed,
    the index stays put so the sibling that moved into its slot is still
    visited.
    """

    children = parent.children
    index = 0
    while index < len(children):
        child = children[index]

        if isinstance(child, Text):
            style_text_node(child, parent, index, options)
        elif isinstance(child, Element):
            _visit_children(child, options)

        # Advance only when the child still occupies its slot.
        if index < len(children) and children[index] is child:
            index += 1


def apply(
    tree: Node | Root, options: StylingOptions | None = None
) -> Node | Root:
    """Apply inline annotations across a document tree.

    Every text node is visited in document order and its leading
    annotation, if any, is consumed. Mutations are made in place and are
    visible to the text nodes visited afterwards.

    Args:
        tree: Root of the tree. A bare text or markup node has no parent
            and is returned unchanged.
        options: Styling options.

    Returns:
        The same ``tree`` object.
    """

    options = options or DEFAULT_OPTIONS

    if isinstance(tree, (Element, Root)):
        _visit_children(tree, options)

    return tree
