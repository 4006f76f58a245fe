"""Creation of an expanded directory tree on the filesystem."""

import errno
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .models import DirectoryNode


class MaterializationError(Exception):
    """Raised when a directory cannot be created."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to create directory {path}: {reason}")


@dataclass
class MaterializationResult:
    """Outcome of materializing a tree."""

    base_path: Path

    created: list[Path] = field(default_factory=list)
    """Directories that did not exist before, in walk order"""

    existing: list[Path] = field(default_factory=list)
    """Directories that were already present"""

    dry_run: bool = False

    @property
    def total(self) -> int:
        return len(self.created) + len(self.existing)


class Materializer:
    """Walks a DirectoryNode tree depth-first and ensures each directory exists.

    Container nodes (empty name) pass their base path through unchanged. The
    walk stops at the first failure; directories created before that point are
    left in place.
    """

    def __init__(self, base_path: Union[str, Path], dry_run: bool = False):
        self.base_path = Path(base_path)
        self.dry_run = dry_run

    def materialize(self, tree: DirectoryNode) -> MaterializationResult:
        """Create every directory described by the tree.

        Raises:
            MaterializationError: On the first directory that cannot be created
        """
        result = MaterializationResult(base_path=self.base_path, dry_run=self.dry_run)
        # A dry run creates nothing, so paths it has already planned stand in
        # for directories a real run would find on its second visit
        planned: set[Path] = set()

        pending = [(tree, self.base_path)]
        while pending:
            node, base = pending.pop()
            path = base
            if not node.is_container:
                path = base / node.segment
                self._ensure_directory(path, result, planned)
            pending.extend((child, path) for child in reversed(node.children))
        return result

    def _ensure_directory(self, path: Path, result: MaterializationResult, planned: set[Path]) -> None:
        try:
            if path in planned or path.is_dir():
                result.existing.append(path)
                return
            if path.exists():
                raise FileExistsError(errno.EEXIST, "Path exists and is not a directory", str(path))
            if self.dry_run:
                planned.add(path)
            else:
                path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MaterializationError(path, e) from e
        result.created.append(path)


def materialize(
    tree: DirectoryNode, base_path: Union[str, Path] = ".", dry_run: bool = False
) -> MaterializationResult:
    """Create the directories of an expanded tree under base_path.

    Args:
        tree: Expanded directory tree
        base_path: Directory the tree is created in
        dry_run: If True, report what would be created without touching the disk

    Returns:
        Lists of created and already existing directories

    Raises:
        MaterializationError: On the first directory that cannot be created
    """
    return Materializer(base_path, dry_run=dry_run).materialize(tree)
