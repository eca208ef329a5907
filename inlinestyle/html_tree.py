"""Convert HTML markup to styling trees and back."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PreformattedString,
    ProcessingInstruction,
    Script,
    Stylesheet,
    Tag,
)

from .styling import apply
from .styling.node import Element, Markup, Root, Text
from .styling.options import StylingOptions
from .styling.types import AttributeMap, NodeList

# Elements whose text is raw content, not document text.
RAW_TEXT_TAGS = frozenset({"script", "style"})


class _InlineDoctype(Doctype):
    """Doctype rendered without the newline BeautifulSoup appends."""

    SUFFIX = ">"


# String classes re-created when rendering markup nodes.
_MARKUP_CLASSES: dict[str, type[NavigableString]] = {
    "CData": CData,
    "Comment": Comment,
    "Declaration": Declaration,
    "Doctype": _InlineDoctype,
    "ProcessingInstruction": ProcessingInstruction,
    "Script": Script,
    "Stylesheet": Stylesheet,
}


def _copy_attributes(tag: Tag) -> AttributeMap:
    """Copy tag attributes, keeping multi-valued ones as lists."""

    attributes: AttributeMap = {}
    for key, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            attributes[key] = [str(item) for item in value]
        else:
            attributes[key] = str(value)
    return attributes


def _convert_children(tag: Any) -> NodeList:  # noqa: ANN401
    """Convert the children of a BeautifulSoup tag into styling nodes."""

    children: NodeList = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(
                Element(
                    tag=child.name,
                    attributes=_copy_attributes(child),
                    children=_convert_children(child),
                )
            )
        elif isinstance(child, PreformattedString):
            children.append(
                Markup(kind=type(child).__name__, value=str(child))
            )
        elif isinstance(child, NavigableString) and tag.name in RAW_TEXT_TAGS:
            # Script and style content is kept verbatim.
            kind = "Stylesheet" if tag.name == "style" else "Script"
            children.append(Markup(kind=kind, value=str(child)))
        elif isinstance(child, NavigableString):
            children.append(Text(value=str(child)))
    return children


def parse_html(html: str) -> Root:
    """Parse HTML markup into a styling tree.

    Args:
        html: HTML document or fragment.

    Returns:
        Root node holding the top-level nodes of the markup.
    """

    soup = BeautifulSoup(html, "html.parser")
    return Root(children=_convert_children(soup))


def _render_attributes(attributes: AttributeMap | None) -> dict[str, str]:
    """Flatten list-valued attributes into space separated strings."""

    rendered: dict[str, str] = {}
    for key, value in (attributes or {}).items():
        rendered[key] = " ".join(value) if isinstance(value, list) else value
    return rendered


def _build_children(
    soup: BeautifulSoup, parent: Tag, children: NodeList
) -> None:
    """Append styling nodes to ``parent`` as BeautifulSoup nodes."""

    for child in children:
        if isinstance(child, Element):
            tag = soup.new_tag(
                child.tag, attrs=_render_attributes(child.attributes)
            )
            parent.append(tag)
            _build_children(soup, tag, child.children)
        elif isinstance(child, Markup):
            # Unknown kinds are rendered as plain, escaped text.
            string_class = _MARKUP_CLASSES.get(child.kind, NavigableString)
            parent.append(string_class(child.value))
        else:
            parent.append(NavigableString(child.value))


def to_html(tree: Root | Element | Text | Markup) -> str:
    """Render a styling tree as HTML markup.

    Args:
        tree: Root or single node to render.

    Returns:
        The serialized markup.
    """

    soup = BeautifulSoup("", "html.parser")
    children = tree.children if isinstance(tree, Root) else [tree]
    _build_children(soup, soup, children)
    return soup.decode()


def style_html(html: str, options: StylingOptions | None = None) -> str:
    """Apply inline annotations found in HTML markup.

    Args:
        html: HTML document or fragment.
        options: Styling options.

    Returns:
        Markup with annotations consumed and applied.
    """

    tree = parse_html(html)
    apply(tree, options)
    return to_html(tree)
