"""Formatters package for dirlayout output.

The main entry point is `OutputFormatter`, which creates and manages the
Rich consoles and all sub-formatters.

Usage:
    output = OutputFormatter(no_color=False)
    output.print(output.layout.format_ast(expression))
"""

from .output import OutputFormatter
from .symbols import Symbol, Symbols, SymbolsFormatter
from .layout import LayoutFormatter

__all__ = [
    "OutputFormatter",
    "Symbol",
    "Symbols",
    "SymbolsFormatter",
    "LayoutFormatter",
]
