"""Structured result of parsing an annotation body."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .types import ClassList, ParsedAttributes


@define(slots=True)
class ParsedAnnotation:
    """Structured result of parsing an annotation body.

    Attributes:
        classes: Class names in the order they appeared; may repeat.
        id: Element id; the last ``#`` token wins.
        attributes: Attributes in parse order, including a synthesized
            ``style`` when declarations were found.
    """

    classes: ClassList = field(factory=list)
    id: str | None = None
    attributes: ParsedAttributes = field(factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for JSON or YAML output."""

        return {
            "classes": list(self.classes),
            "id": self.id,
            "attributes": dict(self.attributes),
        }


@define(slots=True, frozen=True)
class EmptyDeclaration:
    """Result of an annotation with an empty body.

    Applying it forces an empty ``style`` attribute on the target.
    """

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for JSON or YAML output."""

        return {"empty": True}


EMPTY_DECLARATION = EmptyDeclaration()
