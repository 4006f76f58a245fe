"""Directory tree expansion and materialization."""

from .models import DirectoryNode
from .counts import CountKind, classify_count, count_values
from .expander import (
    DEFAULT_MAX_NODES,
    ExpansionError,
    TreeExpander,
    build_tree,
    expand,
)
from .materializer import (
    MaterializationError,
    MaterializationResult,
    Materializer,
    materialize,
)

__all__ = [
    "DirectoryNode",
    "CountKind",
    "classify_count",
    "count_values",
    "DEFAULT_MAX_NODES",
    "ExpansionError",
    "TreeExpander",
    "build_tree",
    "expand",
    "MaterializationError",
    "MaterializationResult",
    "Materializer",
    "materialize",
]
