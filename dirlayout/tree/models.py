"""Directory tree data structures.

Layouts such as ``a > b > c > ...`` produce trees as deep as the chain is
long, so every traversal here keeps its own stack instead of recursing.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class DirectoryNode:
    """Node in an expanded directory tree."""

    name: str = ""
    """Directory name; empty for a container that does not materialize"""

    children: list["DirectoryNode"] = field(default_factory=list)
    """Child nodes, owned exclusively by this node"""

    @property
    def is_container(self) -> bool:
        """Check if this node only groups its children."""
        return self.segment == ""

    @property
    def segment(self) -> str:
        """Name as used in a filesystem path (surrounding whitespace removed)."""
        return self.name.strip()

    @property
    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def clone(self) -> "DirectoryNode":
        """Deep copy of this node and all of its descendants."""
        root = DirectoryNode(name=self.name)
        pending = [(self, root)]
        while pending:
            source, target = pending.pop()
            for child in source.children:
                copy = DirectoryNode(name=child.name)
                target.children.append(copy)
                pending.append((child, copy))
        return root

    def leaves(self) -> list["DirectoryNode"]:
        """Collect leaf nodes of this subtree in depth-first order.

        A node without children is its own single leaf.
        """
        result: list[DirectoryNode] = []
        pending = [self]
        while pending:
            node = pending.pop()
            if node.is_leaf:
                result.append(node)
            else:
                pending.extend(reversed(node.children))
        return result

    def walk(self, depth: int = 0) -> Iterator[tuple["DirectoryNode", int]]:
        """Iterate over the subtree in depth-first pre-order.

        Yields:
            Tuples of (node, depth), starting with this node at ``depth``
        """
        pending = [(self, depth)]
        while pending:
            node, node_depth = pending.pop()
            yield node, node_depth
            pending.extend((child, node_depth + 1) for child in reversed(node.children))

    def count(self) -> int:
        """Number of materializing (non-container) nodes in this subtree."""
        return sum(1 for node, _ in self.walk() if not node.is_container)

    def paths(self) -> list[tuple[str, ...]]:
        """Relative path segments of every materializing node, in walk order.

        Containers contribute no segment, so their children appear at the
        container's own level.
        """
        result: list[tuple[str, ...]] = []
        pending: list[tuple[DirectoryNode, tuple[str, ...]]] = [(self, ())]
        while pending:
            node, prefix = pending.pop()
            if not node.is_container:
                prefix = prefix + (node.segment,)
                result.append(prefix)
            pending.extend((child, prefix) for child in reversed(node.children))
        return result
