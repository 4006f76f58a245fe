"""dirlayout - expand a one-line layout language into directory trees."""

from .ast import Expression, Level, ListPart, Token, TokenType
from .parser import LayoutSyntaxError, parse, tokenize
from .tree import (
    DirectoryNode,
    ExpansionError,
    MaterializationError,
    MaterializationResult,
    build_tree,
    expand,
    materialize,
)

__all__ = [
    "Expression",
    "Level",
    "ListPart",
    "Token",
    "TokenType",
    "LayoutSyntaxError",
    "parse",
    "tokenize",
    "DirectoryNode",
    "ExpansionError",
    "MaterializationError",
    "MaterializationResult",
    "build_tree",
    "expand",
    "materialize",
]
