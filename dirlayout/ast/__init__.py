"""AST module for dirlayout."""

from .types import TokenType
from .models import (
    SourcePosition,
    Token,
    Level,
    ListPart,
    Part,
    Expression,
)

__all__ = [
    "TokenType",
    "SourcePosition",
    "Token",
    "Level",
    "ListPart",
    "Part",
    "Expression",
]
