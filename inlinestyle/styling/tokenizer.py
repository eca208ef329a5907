"""Split an annotation body into tokens."""

from __future__ import annotations

import re

from .types import TokenList

# Unquoted runs and quoted runs glued together without whitespace form a
# single token.
_TOKEN_RE = re.compile(r"""(?:[^\s"']+|"[^"]*"|'[^']*')+""")


def tokenize(body: str) -> TokenList:
    """Split an annotation body into whitespace separated tokens.

    Quoted substrings are kept intact, quotes included, so
    ``title="two words"`` yields one token.

    Args:
        body: Trimmed text found between the annotation delimiters.

    Returns:
        Tokens in source order; an empty body yields an empty list.
    """

    return _TOKEN_RE.findall(body)
