"""Recursive-descent parser for layout strings.

Grammar:

    Expression := Part ( ">" Part )*
    Part       := List | Level
    List       := "[" Expression ( "," Expression )* "]"
    Level      := Name ( ":" Count )?

Both ``Name`` and ``Count`` accept an identifier or a number. The parser keeps
the count as raw text; deciding between a numeric repeat and a letter range is
left to the expander.
"""

from ..ast.models import Expression, Level, ListPart, Part, Token
from ..ast.types import TokenType
from .errors import LayoutSyntaxError
from .lexer import tokenize

NAME_TYPES = (TokenType.IDENT, TokenType.NUMBER)
PART_START_TYPES = (TokenType.OPEN_BRACKET, *NAME_TYPES)

# Lists nest through the call stack, so deeper input is rejected before it
# can reach the interpreter recursion limit.
MAX_NESTING_DEPTH = 100


class LayoutParser:
    """Parser turning a token stream into an Expression."""

    def __init__(self, tokens: list[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token stream must be terminated by an EOF token")
        self.tokens = [token for token in tokens if token.type != TokenType.WHITESPACE]
        self._index = 0
        self._depth = 0

    @classmethod
    def from_string(cls, text: str) -> "LayoutParser":
        """Create a parser for a layout string.

        Raises:
            LayoutSyntaxError: If the string contains an invalid character
        """
        return cls(tokenize(text))

    def parse(self) -> Expression:
        """Parse the whole token stream.

        Returns:
            Parsed expression

        Raises:
            LayoutSyntaxError: If the tokens do not match the grammar
        """
        if self._peek().type == TokenType.EOF:
            raise self._error("empty layout", expected=PART_START_TYPES)

        expression = self._parse_expression()
        if self._peek().type != TokenType.EOF:
            raise self._error(
                "unexpected trailing input",
                expected=(TokenType.GREATER_THAN, TokenType.EOF),
            )
        return expression

    def _parse_expression(self) -> Expression:
        parts: list[Part] = [self._parse_part()]
        while self._peek().type == TokenType.GREATER_THAN:
            self._advance()
            parts.append(self._parse_part())
        return Expression(parts=tuple(parts))

    def _parse_part(self) -> Part:
        token = self._peek()
        if token.type == TokenType.OPEN_BRACKET:
            return self._parse_list()
        if token.type.is_name:
            return self._parse_level()
        raise self._error("expected a directory name or '['", expected=PART_START_TYPES)

    def _parse_list(self) -> ListPart:
        open_bracket = self._expect(TokenType.OPEN_BRACKET)
        if self._depth >= MAX_NESTING_DEPTH:
            raise LayoutSyntaxError(
                f"layout nested too deeply (more than {MAX_NESTING_DEPTH} levels of brackets)",
                open_bracket.position,
                found=str(open_bracket),
            )

        self._depth += 1
        try:
            expressions = self._parse_list_items(open_bracket)
        finally:
            self._depth -= 1
        return ListPart(expressions=tuple(expressions), position=open_bracket.position)

    def _parse_list_items(self, open_bracket: Token) -> list[Expression]:
        expressions = [self._parse_expression()]
        while self._peek().type == TokenType.COMMA:
            self._advance()
            expressions.append(self._parse_expression())

        if self._peek().type != TokenType.CLOSE_BRACKET:
            raise self._error(
                f"expected ',' or ']' in list opened at {open_bracket.position}",
                expected=(TokenType.COMMA, TokenType.GREATER_THAN, TokenType.CLOSE_BRACKET),
            )
        self._advance()
        return expressions

    def _parse_level(self) -> Level:
        name = self._advance()
        count = None
        if self._peek().type == TokenType.COLON:
            self._advance()
            if not self._peek().type.is_name:
                raise self._error("expected a count after ':'", expected=NAME_TYPES)
            count = self._advance().value
        return Level(name=name.value, count=count, position=name.position)

    def _peek(self) -> Token:
        return self.tokens[self._index]

    def _advance(self) -> Token:
        token = self.tokens[self._index]
        if token.type != TokenType.EOF:
            self._index += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        if self._peek().type != token_type:
            raise self._error(f"expected {token_type.description}", expected=(token_type,))
        return self._advance()

    def _error(self, message: str, expected: tuple[TokenType, ...]) -> LayoutSyntaxError:
        token = self._peek()
        return LayoutSyntaxError(
            f"{message}, found {token}",
            position=token.position,
            expected=tuple(token_type.description for token_type in expected),
            found=str(token),
        )


def parse(text: str) -> Expression:
    """Parse a layout string into an Expression.

    Args:
        text: Layout string, e.g. ``"site:5 > [a, b:2 > c] > d"``

    Returns:
        Parsed expression

    Raises:
        LayoutSyntaxError: If the string is empty or does not match the grammar
    """
    return LayoutParser.from_string(text).parse()
