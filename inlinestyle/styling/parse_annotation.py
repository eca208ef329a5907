"""Recognise and parse annotations at the start of text values."""

from __future__ import annotations

import re

from .classifier import classify
from .options import DEFAULT_OPTIONS, StylingOptions
from .parsed_annotation import (
    EMPTY_DECLARATION,
    EmptyDeclaration,
    ParsedAnnotation,
)
from .tokenizer import tokenize


def match_annotation(
    value: str, options: StylingOptions | None = None
) -> re.Match[str] | None:
    """Match an annotation anchored at offset 0 of ``value``.

    Args:
        value: Text node value.
        options: Styling options providing the delimiters.

    Returns:
        The match, whose first group is the raw body, or ``None`` when the
        value does not start with a terminated annotation.
    """

    options = options or DEFAULT_OPTIONS
    return options.pattern.match(value)


def parse_annotation(
    body: str, options: StylingOptions | None = None
) -> ParsedAnnotation | EmptyDeclaration:
    """Parse the raw body of an annotation.

    Args:
        body: Text between the delimiters.
        options: Styling options.

    Returns:
        ``EMPTY_DECLARATION`` for a blank body, otherwise the classified
        tokens.
    """

    body = body.strip()
    if not body:
        return EMPTY_DECLARATION

    return classify(tokenize(body), options)
