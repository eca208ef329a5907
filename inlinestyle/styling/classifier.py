"""Classify annotation tokens into classes, id, attributes and styles."""

from __future__ import annotations

import logging

from .options import DEFAULT_OPTIONS, StylingOptions
from .parsed_annotation import ParsedAnnotation
from .types import DeclarationList, TokenList

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def _is_attribute(token: str) -> bool:
    """Tell if ``token`` has the ``key=value`` shape."""

    return "=" in token and ":" not in token


def _starts_new_item(token: str) -> bool:
    """Tell if ``token`` ends the declaration being accumulated."""

    return (
        token.startswith(".")
        or token.startswith("#")
        or _is_attribute(token)
        or ":" in token
    )


def _unquote(value: str) -> str:
    """Strip one layer of matching quotes from ``value``."""

    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def _split_attribute(token: str) -> tuple[str, str]:
    """Split a ``key=value`` token on its first ``=``."""

    key, _, value = token.partition("=")
    return key, _unquote(value)


def _finish_declaration(parts: list[str]) -> str:
    """Join a declaration and make sure it ends with ``;``."""

    declaration = " ".join(parts).strip()
    if not declaration.endswith(";"):
        declaration += ";"
    return declaration


def classify(
    tokens: TokenList, options: StylingOptions | None = None
) -> ParsedAnnotation:
    """Classify annotation tokens into a structured result.

    Tokens are read left to right. ``.name`` adds a class, ``#name`` sets
    the id, ``key=value`` (without ``:``) sets an attribute and a token
    containing ``:`` starts a CSS declaration that absorbs the following
    tokens until one of them starts a new item. Anything else is dropped.

    Args:
        tokens: Tokens produced by :func:`tokenize`.
        options: Styling options; only ``explicit_style_wins`` is used.

    Returns:
        The parsed annotation.
    """

    options = options or DEFAULT_OPTIONS
    result = ParsedAnnotation()
    declarations: DeclarationList = []

    i = 0
    while i < len(tokens):
        token = tokens[i]

        if token.startswith("."):
            result.classes.append(token[1:])
            i += 1
        elif token.startswith("#"):
            result.id = token[1:]
            i += 1
        elif _is_attribute(token):
            key, value = _split_attribute(token)
            result.attributes[key] = value
            i += 1
        elif ":" in token:
            # Absorb the value tokens belonging to this declaration.
            parts = [token]
            j = i + 1
            while j < len(tokens) and not _starts_new_item(tokens[j]):
                parts.append(tokens[j])
                j += 1
            declarations.append(_finish_declaration(parts))
            i = j
        else:
            logger.debug(f"Dropping unrecognised annotation token {token!r}")
            i += 1

    if declarations:
        if options.explicit_style_wins and "style" in result.attributes:
            logger.debug("Keeping explicit style over declarations")
        else:
            result.attributes["style"] = " ".join(declarations).strip()

    return result
