"""Output formatter - the main entry point for all formatting operations.

Usage:
    output = OutputFormatter(no_color=False)
    output.print(output.layout.format_directory_tree(tree, "."))
    output.print_error("Syntax error:", str(err))
"""

from typing import Union

from rich.console import Console, RenderableType
from rich.text import Text

from .layout import LayoutFormatter
from .symbols import SymbolsFormatter


class OutputFormatter:
    """Central formatter that manages the Rich consoles and sub-formatters.

    Regular output goes to stdout; warnings and errors go to stderr. The
    no_color option is handled by the Rich consoles when printing, so
    formatters don't need to conditionally apply styles.
    """

    def __init__(self, no_color: bool):
        """Initialize the output formatter with all sub-formatters.

        Args:
            no_color: If True, disable all colors and styling in output
        """
        self._no_color = no_color

        self._console = Console(no_color=no_color, force_terminal=None, highlight=False)
        self._error_console = Console(
            no_color=no_color, force_terminal=None, highlight=False, stderr=True
        )

        # Symbols first as the layout formatter depends on it
        self._symbols = SymbolsFormatter(no_color=no_color)
        self._layout = LayoutFormatter(symbols=self._symbols)

    @property
    def console(self) -> Console:
        """Get the underlying Rich console."""
        return self._console

    @property
    def symbols(self) -> SymbolsFormatter:
        """Get the symbols formatter for emoji/ASCII symbol access."""
        return self._symbols

    @property
    def layout(self) -> LayoutFormatter:
        """Get the formatter for tokens, ASTs and directory trees."""
        return self._layout

    @property
    def no_color(self) -> bool:
        return self._no_color

    def print(self, message: Union[str, RenderableType]) -> None:
        """Print a message or renderable using the stdout console."""
        self._console.print(message, highlight=False)

    def print_heading(self, symbol: str, title: str) -> None:
        line = Text()
        line.append(f"{symbol} ")
        line.append(title, style="bold")
        self._console.print(line, highlight=False)

    def print_success(self, message: str) -> None:
        line = Text()
        line.append(f"{self._symbols.Check} ")
        line.append(message, style="bold green")
        self._console.print(line, highlight=False)

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        line = Text()
        line.append(f"{self._symbols.Warning} ", style="yellow")
        line.append("Warning: ", style="bold yellow")
        line.append(message)
        self._error_console.print(line, highlight=False)

    def print_error(self, label: str, message: str) -> None:
        """Print an error message to stderr.

        Args:
            label: Error kind, e.g. "Syntax error:"
            message: Error details
        """
        line = Text()
        line.append(f"{self._symbols.Cross} ")
        line.append(label, style="bold red")
        line.append(f" {message}")
        self._error_console.print(line, highlight=False)
