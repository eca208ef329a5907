"""Common type aliases for the styling structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .node import Element, Markup, Root, Text  # noqa: F401


AttributeValue = Union[str, list[str]]
AttributeMap = dict[str, AttributeValue]
ParsedAttributes = dict[str, str]
ClassList = list[str]
TokenList = list[str]
DeclarationList = list[str]
Node = Union["Element", "Text", "Markup"]
NodeList = list[Node]
Parent = Union["Element", "Root"]
