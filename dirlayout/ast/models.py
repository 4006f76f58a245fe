"""AST model classes for the layout language."""

from dataclasses import dataclass
from typing import Optional, Union

from .types import TokenType


@dataclass(frozen=True)
class SourcePosition:
    """Position of a token in the layout string."""

    offset: int
    """Zero-based character offset"""

    line: int
    """One-based line number"""

    column: int
    """One-based column number"""

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A classified lexeme."""

    type: TokenType
    value: str
    position: SourcePosition

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return self.type.description
        return repr(self.value)


@dataclass(frozen=True)
class Level:
    """A named directory, optionally repeated: ``name`` or ``name:count``."""

    name: str
    """Directory base name (identifier or number)"""

    count: Optional[str] = None
    """Raw count text, interpreted by the expander"""

    position: Optional[SourcePosition] = None

    def __str__(self) -> str:
        if self.count is None:
            return self.name
        return f"{self.name}:{self.count}"


@dataclass(frozen=True)
class ListPart:
    """A bracketed, comma-separated group of nested expressions."""

    expressions: tuple["Expression", ...]
    """Sibling expressions, in source order"""

    position: Optional[SourcePosition] = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(expr) for expr in self.expressions) + "]"


Part = Union[Level, ListPart]


@dataclass(frozen=True)
class Expression:
    """A sequence of parts joined by the nesting operator ``>``."""

    parts: tuple[Part, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if the expression has no parts."""
        return len(self.parts) == 0

    @property
    def head(self) -> Part:
        """First part of the expression."""
        if self.is_empty:
            raise ValueError("Empty expression has no head part")
        return self.parts[0]

    @property
    def tail(self) -> "Expression":
        """Expression made of every part after the first."""
        return Expression(parts=self.parts[1:])

    def __str__(self) -> str:
        return " > ".join(str(part) for part in self.parts)
