"""Type definitions for the layout AST."""

from enum import Enum


class TokenType(Enum):
    """Lexical classes recognized by the layout lexer."""

    IDENT = "identifier"
    NUMBER = "number"
    COLON = "':'"
    COMMA = "','"
    GREATER_THAN = "'>'"
    OPEN_BRACKET = "'['"
    CLOSE_BRACKET = "']'"
    WHITESPACE = "whitespace"
    EOF = "end of input"

    @property
    def description(self) -> str:
        """Human-readable description used in syntax error messages."""
        return self.value

    @property
    def is_name(self) -> bool:
        """Whether tokens of this type can be used as a directory name."""
        return self in (TokenType.IDENT, TokenType.NUMBER)
