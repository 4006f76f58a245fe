"""Status and heading symbols with emoji/ASCII fallbacks.

Usage:
    symbols = SymbolsFormatter()
    print(symbols.Check)   # "✅" on an emoji-capable terminal, "+" otherwise
    print(symbols.get(Symbols.Folder))
"""

import codecs
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Union


@dataclass(frozen=True)
class Symbol:
    """A symbol with emoji and ASCII fallback."""

    emoji: str
    ascii: str


class Symbols(Enum):
    """Every symbol the CLI prints, looked up by member name."""

    Check = Symbol("✅", "+")
    Cross = Symbol("❌", "x")
    Warning = Symbol("⚠️", "!")
    Info = Symbol("ℹ️", "i")
    Folder = Symbol("📂", ">")
    Tree = Symbol("🌳", ">")
    Gear = Symbol("⚙️", ">")
    Clipboard = Symbol("📋", ">")


class SymbolsFormatter:
    """Resolves symbols to emoji or ASCII for the current terminal.

    Any ``Symbols`` member name can be read as an attribute
    (``formatter.Check``). Emoji is disabled when no_color=True.
    """

    def __init__(self, no_color: bool = False):
        self._no_color = no_color

    @cached_property
    def supports_emoji(self) -> bool:
        """Detect if stdout can display emoji."""
        if self._no_color or platform.system() == "Windows":
            return False

        encoding = getattr(sys.stdout, "encoding", None)
        if not encoding:
            return False
        try:
            return codecs.lookup(encoding).name.startswith("utf")
        except LookupError:
            return False

    def get(self, symbol: Union[Symbols, Symbol]) -> str:
        """Get the resolved symbol string."""
        if isinstance(symbol, Symbols):
            symbol = symbol.value
        return symbol.emoji if self.supports_emoji else symbol.ascii

    def __getattr__(self, name: str) -> str:
        try:
            member = Symbols[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} has no symbol {name!r}") from None
        return self.get(member)
