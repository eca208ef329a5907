"""Options controlling how annotations are recognised and applied."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from attrs import define, field, validators

DEFAULT_OPEN_DELIMITER = "{"
DEFAULT_CLOSE_DELIMITER = "}"


def _non_empty(
    instance: Any,  # noqa: ANN401
    attribute: Any,  # noqa: ANN401
    value: str,
) -> None:
    """Reject empty delimiter strings."""

    if not value:
        raise ValueError(f"{attribute.name} must not be empty")


@define(slots=True, frozen=True)
class StylingOptions:
    """Options controlling how annotations are recognised and applied.

    Attributes:
        open_delimiter: Text that opens an annotation at offset 0.
        close_delimiter: Text that closes the annotation; the first
            occurrence ends it.
        explicit_style_wins: Keep an explicit ``style=...`` token instead
            of replacing it with the accumulated declarations.
    """

    open_delimiter: str = field(
        default=DEFAULT_OPEN_DELIMITER,
        validator=[validators.instance_of(str), _non_empty],
    )
    close_delimiter: str = field(
        default=DEFAULT_CLOSE_DELIMITER,
        validator=[validators.instance_of(str), _non_empty],
    )
    explicit_style_wins: bool = field(
        default=False, validator=validators.instance_of(bool)
    )

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled pattern matching an annotation at the start of text."""

        return _compile_pattern(self.open_delimiter, self.close_delimiter)


@lru_cache(maxsize=None)
def _compile_pattern(
    open_delimiter: str, close_delimiter: str
) -> re.Pattern[str]:
    """Return the cached annotation pattern for a delimiter pair."""

    # The body is the shortest run up to the first close delimiter.
    return re.compile(
        re.escape(open_delimiter) + r"(.*?)" + re.escape(close_delimiter),
        re.DOTALL,
    )


DEFAULT_OPTIONS = StylingOptions()
