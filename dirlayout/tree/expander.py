"""Expansion of a parsed layout into a concrete directory tree."""

import sys
from typing import Optional

from ..ast.models import Expression, Level, ListPart, Part
from ..parser.layout_parser import parse
from .counts import CountKind, classify_count, count_values
from .models import DirectoryNode

DEFAULT_MAX_NODES = 100_000

# No count above sys.maxsize can ever be materialized
MAX_COUNT_DIGITS = len(str(sys.maxsize))


class ExpansionError(Exception):
    """Raised when a parsed layout cannot be expanded."""

    def __init__(self, message: str, level: Optional[Level] = None):
        self.level = level
        super().__init__(message)


class TreeExpander:
    """Expands Expressions into DirectoryNode trees.

    Each expression becomes a container node whose children are the siblings
    produced by the first part. The remaining parts are expanded once and an
    independent copy of that expansion is attached to every leaf below those
    siblings, so no two branches ever share a child list.
    """

    def __init__(self, max_nodes: Optional[int] = DEFAULT_MAX_NODES):
        """Initialize the expander.

        Args:
            max_nodes: Maximum number of directories a layout may expand to,
                or None for no limit
        """
        self.max_nodes = max_nodes

    def expand(self, expression: Expression) -> DirectoryNode:
        """Expand an expression.

        Args:
            expression: Parsed layout expression

        Returns:
            Container node holding the expanded siblings

        Raises:
            ExpansionError: If a count is malformed or the limit is exceeded
        """
        if expression.is_empty:
            return DirectoryNode()

        # Every part is expanded first (left to right, so the first bad count
        # is the one reported), then folded from the right: each part's
        # leaves receive a copy of everything expanded after it.
        expanded = [self._expand_part(part) for part in expression.parts]

        rest: Optional[DirectoryNode] = None
        for top_nodes in reversed(expanded):
            if rest is not None:
                self._attach(top_nodes, rest)
            rest = DirectoryNode(name="", children=top_nodes)
        return rest

    def _expand_part(self, part: Part) -> list[DirectoryNode]:
        if isinstance(part, Level):
            return self._expand_level(part)
        if isinstance(part, ListPart):
            return self._expand_list(part)
        raise TypeError(f"Unsupported layout part: {type(part).__name__}")

    def _expand_level(self, level: Level) -> list[DirectoryNode]:
        if level.count is None:
            return [DirectoryNode(name=level.name)]

        kind = classify_count(level.count)
        if kind is None:
            location = f" at {level.position}" if level.position else ""
            raise ExpansionError(
                f"Invalid count '{level.count}' for level '{level}'{location}. "
                f"Expected a non-negative integer or a single letter",
                level=level,
            )
        if kind is CountKind.NUMERIC:
            # Checked before building the names so huge counts fail fast
            self._check_limit(self._numeric_count(level), level)

        return [DirectoryNode(name=f"{level.name} {suffix}") for suffix in count_values(level.count)]

    def _numeric_count(self, level: Level) -> int:
        # Compared by length before int(): very long digit runs are slow to
        # convert and rejected outright by the int/str digit limit
        digits = level.count.lstrip("0") or "0"
        if self.max_nodes is not None and len(digits) > len(str(self.max_nodes)):
            raise ExpansionError(
                f"Count for level '{level.name}' has {len(digits)} digits, "
                f"exceeding the limit of {self.max_nodes} directories",
                level=level,
            )
        if len(digits) > MAX_COUNT_DIGITS or int(digits) > sys.maxsize:
            raise ExpansionError(
                f"Count for level '{level.name}' is too large ({len(digits)} digits)",
                level=level,
            )
        return int(digits)

    def _expand_list(self, part: ListPart) -> list[DirectoryNode]:
        nodes: list[DirectoryNode] = []
        for expression in part.expressions:
            # Splice the siblings; the wrapping container never materializes
            nodes.extend(self.expand(expression).children)
        self._check_limit(sum(node.count() for node in nodes))
        return nodes

    def _attach(self, top_nodes: list[DirectoryNode], rest: DirectoryNode) -> None:
        # Leaves are collected up front so freshly attached nodes are not revisited
        leaves = [leaf for node in top_nodes for leaf in node.leaves()]
        total = sum(node.count() for node in top_nodes) + len(leaves) * rest.count()
        self._check_limit(total)

        for leaf in leaves:
            leaf.children = [child.clone() for child in rest.children]

    def _check_limit(self, total: int, level: Optional[Level] = None) -> None:
        if self.max_nodes is None or total <= self.max_nodes:
            return
        raise ExpansionError(
            f"Layout expands to {total} directories, exceeding the limit of {self.max_nodes}",
            level=level,
        )


def expand(expression: Expression, max_nodes: Optional[int] = DEFAULT_MAX_NODES) -> DirectoryNode:
    """Expand a parsed expression into a directory tree.

    Args:
        expression: Parsed layout expression
        max_nodes: Maximum number of directories, or None for no limit

    Returns:
        Root container node

    Raises:
        ExpansionError: If a count is malformed or the limit is exceeded
    """
    return TreeExpander(max_nodes=max_nodes).expand(expression)


def build_tree(text: str, max_nodes: Optional[int] = DEFAULT_MAX_NODES) -> DirectoryNode:
    """Parse and expand a layout string.

    Raises:
        LayoutSyntaxError: If the string does not match the grammar
        ExpansionError: If the parsed layout cannot be expanded
    """
    return expand(parse(text), max_nodes=max_nodes)
