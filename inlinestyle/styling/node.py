"""Document tree nodes visited by the styling pass."""

from __future__ import annotations

from attrs import define, field

from .types import AttributeMap, NodeList


@define(slots=True, eq=False)
class Element:
    """An element node of the document tree.

    Attributes:
        tag: Tag name such as ``"p"``.
        attributes: Attribute bag; ``class`` may hold a string or a list.
        children: Ordered child nodes.
    """

    tag: str
    attributes: AttributeMap | None = field(factory=dict)
    children: NodeList = field(factory=list, repr=False)


@define(slots=True, eq=False)
class Text:
    """A text node of the document tree.

    Attributes:
        value: Character data of the node.
    """

    value: str


@define(slots=True, eq=False)
class Root:
    """Top of a document tree; a parent that is not an element.

    Attributes:
        children: Ordered top-level nodes.
    """

    children: NodeList = field(factory=list)


@define(slots=True, eq=False)
class Markup:
    """Opaque content carried through the tree without being styled.

    Comments, doctypes and the raw text of ``script`` and ``style``
    elements are kept this way so that rendering reproduces them.

    Attributes:
        kind: Name of the markup kind, such as ``"Comment"``.
        value: Content of the markup, without its delimiters.
    """

    kind: str
    value: str
