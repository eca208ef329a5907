"""Parse inline annotations and apply them to document trees."""

from .apply import apply, style_text_node
from .classifier import classify
from .merger import merge_attributes
from .node import Element, Markup, Root, Text
from .options import StylingOptions
from .parse_annotation import match_annotation, parse_annotation
from .parsed_annotation import (
    EMPTY_DECLARATION,
    EmptyDeclaration,
    ParsedAnnotation,
)
from .pruner import prune_if_empty
from .resolver import resolve_target
from .tokenizer import tokenize

__all__ = [
    "EMPTY_DECLARATION",
    "Element",
    "EmptyDeclaration",
    "Markup",
    "ParsedAnnotation",
    "Root",
    "StylingOptions",
    "Text",
    "apply",
    "classify",
    "match_annotation",
    "merge_attributes",
    "parse_annotation",
    "prune_if_empty",
    "resolve_target",
    "style_text_node",
    "tokenize",
]
