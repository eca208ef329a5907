"""Tests for annotation tokenization."""

from inlinestyle.styling import tokenize


def test_empty_body_has_no_tokens() -> None:
    assert tokenize("") == []


def test_splits_on_whitespace() -> None:
    assert tokenize(".a  #b\tcolor:\nred;") == [".a", "#b", "color:", "red;"]


def test_quoted_runs_are_atomic() -> None:
    assert tokenize('title="two words" .x') == ['title="two words"', ".x"]
    assert tokenize("alt='it is' x") == ["alt='it is'", "x"]


def test_adjacent_runs_form_one_token() -> None:
    """Quoted and unquoted runs without whitespace stay together."""

    assert tokenize('"a b"c d') == ['"a b"c', "d"]
    assert tokenize("font-family: 'Open Sans', serif") == [
        "font-family:",
        "'Open Sans',",
        "serif",
    ]
