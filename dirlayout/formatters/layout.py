"""Read-only views over tokens, parsed layouts and expanded trees.

All formatting methods return Rich renderables; styling is always applied and
the Rich console strips it in no_color mode.
"""

from typing import Union

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..ast.models import Expression, Level, ListPart, Token
from ..ast.types import TokenType
from ..tree.materializer import MaterializationResult
from ..tree.models import DirectoryNode
from .symbols import SymbolsFormatter


class LayoutFormatter:
    """Formats layout pipeline values for display."""

    def __init__(self, symbols: SymbolsFormatter):
        self._symbols = symbols

    def format_tokens(self, tokens: list[Token]) -> Table:
        """Build a table listing every token with its position."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Position")
        table.add_column("Type", style="magenta")
        table.add_column("Value", style="cyan")

        for index, token in enumerate(tokens, 1):
            value = repr(token.value) if token.type != TokenType.EOF else ""
            table.add_row(str(index), str(token.position), token.type.name, value)
        return table

    def format_ast(self, expression: Expression) -> Tree:
        """Build a tree view of a parsed expression."""
        root = Tree(Text("expression", style="bold"), guide_style="dim")
        self._add_expression(root, expression)
        return root

    def _add_expression(self, branch: Tree, expression: Expression) -> None:
        for part in expression.parts:
            if isinstance(part, Level):
                label = Text()
                label.append("level ", style="dim")
                label.append(part.name, style="cyan")
                if part.count is not None:
                    label.append(":", style="dim")
                    label.append(part.count, style="yellow")
                branch.add(label)
            elif isinstance(part, ListPart):
                list_branch = branch.add(Text("list", style="magenta"))
                for sub_expression in part.expressions:
                    sub_branch = list_branch.add(Text("expression", style="bold"))
                    self._add_expression(sub_branch, sub_expression)

    def format_directory_tree(self, node: DirectoryNode, root_label: Union[str, Text]) -> Tree:
        """Build a tree view of an expanded directory tree.

        Args:
            node: Root of the expanded tree (usually a container)
            root_label: Label for the root, typically the output directory
        """
        root = Tree(Text(f"{self._symbols.Folder} ").append(root_label, style="bold"), guide_style="dim")
        self._add_directory(root, node)
        return root

    def _add_directory(self, branch: Tree, node: DirectoryNode) -> None:
        # Containers are transparent: their children hang off the parent branch
        pending = [(branch, node)]
        while pending:
            parent, current = pending.pop()
            if not current.is_container:
                parent = parent.add(Text(current.segment, style="cyan"))
            pending.extend((parent, child) for child in reversed(current.children))

    def format_summary(self, result: MaterializationResult) -> Text:
        """Summarize created and existing directory counts."""
        created_label = "would be created" if result.dry_run else "created"
        line = Text()
        line.append(str(len(result.created)), style="bold")
        line.append(f" {created_label}, ", style="dim")
        line.append(str(len(result.existing)), style="bold")
        line.append(" already existed", style="dim")
        return line
