"""Lexer for layout strings."""

import re

from ..ast.models import SourcePosition, Token
from ..ast.types import TokenType
from .errors import LayoutSyntaxError


class LayoutLexer:
    """Splits a layout string into classified tokens."""

    # Rules are tried in order; the first pattern that matches wins.
    RULES: tuple[tuple[TokenType, re.Pattern[str]], ...] = (
        (TokenType.IDENT, re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")),
        (TokenType.NUMBER, re.compile(r"[0-9]+")),
        (TokenType.COLON, re.compile(r":")),
        (TokenType.COMMA, re.compile(r",")),
        (TokenType.GREATER_THAN, re.compile(r">")),
        (TokenType.OPEN_BRACKET, re.compile(r"\[")),
        (TokenType.CLOSE_BRACKET, re.compile(r"\]")),
        (TokenType.WHITESPACE, re.compile(r"\s+")),
    )

    def __init__(self, text: str):
        self.text = text
        self._offset = 0
        self._line = 1
        self._column = 1

    def tokenize(self, keep_whitespace: bool = False) -> list[Token]:
        """Tokenize the whole input.

        Args:
            keep_whitespace: If True, whitespace tokens are kept in the stream

        Returns:
            Tokens in source order, terminated by a single EOF token

        Raises:
            LayoutSyntaxError: If a character matches no lexical rule
        """
        tokens: list[Token] = []
        while self._offset < len(self.text):
            token = self._next_token()
            if token.type == TokenType.WHITESPACE and not keep_whitespace:
                continue
            tokens.append(token)
        tokens.append(Token(TokenType.EOF, "", self._position()))
        return tokens

    def _next_token(self) -> Token:
        position = self._position()
        for token_type, pattern in self.RULES:
            match = pattern.match(self.text, self._offset)
            if match:
                value = match.group(0)
                self._advance(value)
                return Token(token_type, value, position)

        found = self.text[self._offset]
        raise LayoutSyntaxError(
            f"invalid character {found!r}",
            position=position,
            expected=(),
            found=repr(found),
        )

    def _advance(self, value: str) -> None:
        for char in value:
            if char == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        self._offset += len(value)

    def _position(self) -> SourcePosition:
        return SourcePosition(offset=self._offset, line=self._line, column=self._column)


def tokenize(text: str, keep_whitespace: bool = False) -> list[Token]:
    """Tokenize a layout string.

    Args:
        text: Layout string
        keep_whitespace: If True, whitespace tokens are kept in the stream

    Returns:
        List of tokens ending with an EOF token
    """
    return LayoutLexer(text).tokenize(keep_whitespace=keep_whitespace)
