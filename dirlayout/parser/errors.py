"""Errors raised while reading layout strings."""

from typing import Optional

from ..ast.models import SourcePosition


class LayoutSyntaxError(Exception):
    """Raised when a layout string does not match the grammar."""

    def __init__(
        self,
        message: str,
        position: SourcePosition,
        expected: tuple[str, ...] = (),
        found: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(f"{position}: {message}")
