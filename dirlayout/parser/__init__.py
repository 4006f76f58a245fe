"""Lexer and parser for the layout language."""

from .errors import LayoutSyntaxError
from .lexer import LayoutLexer, tokenize
from .layout_parser import LayoutParser, parse

__all__ = [
    "LayoutSyntaxError",
    "LayoutLexer",
    "LayoutParser",
    "tokenize",
    "parse",
]
