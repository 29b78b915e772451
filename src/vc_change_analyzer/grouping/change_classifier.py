"""
Partitioning of changed files by their status code.

The classifier routes each reported file into one of the four
:class:`~vc_change_analyzer.grouping.change_model.ChangeSet` categories
based on the single-letter status reported by the version control
reader. It is intentionally simple and deterministic so that it can be
unit tested without a repository.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from vc_change_analyzer.grouping.change_model import ChangeSet
from vc_change_analyzer.grouping.exclusion import DEFAULT_EXCLUDES, is_excluded


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


STATUS_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("A", "added"),
    ("M", "modified"),
    ("D", "deleted"),
    ("R", "renamed"),
)


def classify_changes(
    changes: Iterable[object],
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> ChangeSet:
    """Partition file changes into added, modified, deleted and renamed paths.

    Parameters
    ----------
    changes : Iterable[object]
        File change objects with ``path`` and ``status`` attributes, such
        as :class:`vc_change_analyzer.vcs.git_client.FileChange`.
    exclude : Iterable[str]
        Exclusion list; matching paths are dropped.

    Returns
    -------
    ChangeSet
        Paths grouped by category, in input order within each category.

    Notes
    -----
    Status codes other than ``A``, ``M``, ``D`` and ``R`` (copies,
    unmerged paths) are dropped silently. A path is placed in at most one
    category; a repeated path keeps its first classification.
    """
    exclude = frozenset(exclude)
    categories = dict(STATUS_CATEGORIES)
    change_set = ChangeSet()
    seen = set()

    for change in changes:
        path = change.path  # type: ignore[attr-defined]
        status = change.status  # type: ignore[attr-defined]
        if is_excluded(path, exclude):
            logger.debug("Skipping excluded path: %s", path)
            continue
        category = categories.get(status)
        if category is None:
            logger.debug("Ignoring %s with unsupported status '%s'", path, status)
            continue
        if path in seen:
            continue
        seen.add(path)
        change_set.category(category).append(path)

    return change_set
