"""
Data models for classified changes.

The :class:`ChangeSet` holds the four-way categorisation of changed file
paths produced by :func:`vc_change_analyzer.grouping.change_classifier.classify_changes`.
The :class:`DiffRecord` pairs a single changed file with its unified
diff as returned by the version control reader.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


# Category names in display order. Bullet lists and counts iterate in
# this order.
CATEGORIES: Tuple[str, ...] = ("added", "modified", "deleted", "renamed")


@dataclass(frozen=True)
class DiffRecord:
    """Unified diff of one changed, non-excluded file."""

    file: str
    diff: str

    def to_dict(self) -> Dict[str, str]:
        return {"file": self.file, "diff": self.diff}


@dataclass
class ChangeSet:
    """Changed file paths partitioned by change category.

    Attributes
    ----------
    added : List[str]
        Paths with status ``A``.
    modified : List[str]
        Paths with status ``M``.
    deleted : List[str]
        Paths with status ``D``.
    renamed : List[str]
        Paths with status ``R`` (the new path of the rename).
    """

    added: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    renamed: List[str] = field(default_factory=list)

    def category(self, name: str) -> List[str]:
        """Return the path list for the category ``name``."""
        if name not in CATEGORIES:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> List[Tuple[str, List[str]]]:
        """Return ``(category, paths)`` pairs in display order."""
        return [(name, self.category(name)) for name in CATEGORIES]

    def all_paths(self) -> List[str]:
        paths: List[str] = []
        for _, files in self.items():
            paths.extend(files)
        return paths

    @property
    def total(self) -> int:
        """Number of paths across all four categories."""
        return sum(len(files) for _, files in self.items())

    def summary(self) -> Dict[str, int]:
        """Per-category counts keyed the way tool hosts expect them."""
        return {
            "totalFiles": self.total,
            "addedCount": len(self.added),
            "modifiedCount": len(self.modified),
            "deletedCount": len(self.deleted),
            "renamedCount": len(self.renamed),
        }

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(files) for name, files in self.items()}
