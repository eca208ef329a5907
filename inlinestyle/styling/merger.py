"""Merge parsed annotations into an element's attribute bag."""

from __future__ import annotations

from .node import Element
from .parsed_annotation import EmptyDeclaration, ParsedAnnotation
from .types import AttributeMap, AttributeValue, ClassList


def _class_list(value: AttributeValue | None) -> ClassList:
    """Normalize an existing ``class`` value into a list of names."""

    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return value.split()


def _merge_classes(attributes: AttributeMap, classes: ClassList) -> None:
    """Union ``classes`` into the ``class`` attribute, keeping order."""

    if not classes:
        return

    merged = _class_list(attributes.get("class")) + classes
    attributes["class"] = " ".join(dict.fromkeys(merged))


def _merge_style(existing: AttributeValue | None, style: str) -> str:
    """Append ``style`` to an existing style declaration list."""

    if isinstance(existing, list):
        existing = " ".join(existing)
    existing = existing or ""

    if not existing:
        separator = ""
    elif existing.endswith(";"):
        separator = " "
    else:
        separator = "; "
    return existing + separator + style


def merge_attributes(
    target: Element, parsed: ParsedAnnotation | EmptyDeclaration
) -> None:
    """Merge a parsed annotation into ``target`` in place.

    Classes are unioned with the existing ones, the id is replaced, a
    ``style`` is appended to the existing declarations and every other
    attribute overwrites the existing value. The empty declaration
    replaces the style with an empty string.

    Args:
        target: Element receiving the annotation.
        parsed: Result of :func:`parse_annotation`.
    """

    if target.attributes is None:
        target.attributes = {}
    attributes = target.attributes

    if isinstance(parsed, EmptyDeclaration):
        attributes["style"] = ""
        return

    _merge_classes(attributes, parsed.classes)

    if parsed.id is not None:
        attributes["id"] = parsed.id

    for key, value in parsed.attributes.items():
        if key == "style":
            attributes["style"] = _merge_style(attributes.get("style"), value)
        else:
            attributes[key] = value
