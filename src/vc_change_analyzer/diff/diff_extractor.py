"""
Diff collection utilities.

This module gathers everything the analyzer needs from a version
control client: the status of each changed file and the unified diff of
each file with working-tree changes. The caller provides a client that
implements ``get_changes()``, ``get_diff_files()`` and
``get_diff(file_path)`` (see :class:`vc_change_analyzer.vcs.git_client.GitClient`).
Paths on the exclusion list are dropped before any diff is requested.

Diffs are retrieved one file at a time in the order the client reports
the files. Client errors are not swallowed here; the entry points in
:mod:`vc_change_analyzer.tools.commit_tools` decide how to report them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from vc_change_analyzer.grouping.change_model import DiffRecord
from vc_change_analyzer.grouping.exclusion import DEFAULT_EXCLUDES, is_excluded


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


NO_CHANGES_MESSAGE = "No changes detected to commit"

# Separator placed between per-file diffs when they are concatenated.
DIFF_SEPARATOR = "\n\n"


class NoChangesError(Exception):
    """Raised when the working tree has no eligible changes to analyze."""

    def __init__(self, message: str = NO_CHANGES_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CollectedChanges:
    """Status entries and diffs gathered for one analysis run.

    Attributes
    ----------
    changes : List[object]
        Non-excluded file changes with ``path`` and ``status`` attributes.
    diffs : List[DiffRecord]
        One record per non-excluded file with working-tree changes.
    """

    changes: List[object] = field(default_factory=list)
    diffs: List[DiffRecord] = field(default_factory=list)

    @property
    def diff_text(self) -> str:
        """All diffs concatenated in collection order."""
        return DIFF_SEPARATOR.join(record.diff for record in self.diffs)


def extract_diffs(
    vcs_client: object,
    file_paths: Iterable[str],
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> List[DiffRecord]:
    """Extract unified diffs for a sequence of file paths.

    Parameters
    ----------
    vcs_client : object
        The VCS client instance. Must implement ``get_diff(file_path)``.
    file_paths : Iterable[str]
        Paths relative to the repository root.
    exclude : Iterable[str]
        Exclusion list; matching paths are skipped.

    Returns
    -------
    List[DiffRecord]
        Records in the order of ``file_paths``.
    """
    exclude = frozenset(exclude)
    records: List[DiffRecord] = []
    for file_path in file_paths:
        if is_excluded(file_path, exclude):
            logger.debug("Skipping excluded path: %s", file_path)
            continue
        diff = vcs_client.get_diff(file_path)  # type: ignore[attr-defined]
        records.append(DiffRecord(file=file_path, diff=diff))
    return records


def collect_changes(
    vcs_client: object,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> CollectedChanges:
    """Collect the status entries and diffs of the working tree.

    Raises
    ------
    NoChangesError
        If neither the status nor the diff listing contains a
        non-excluded file.
    """
    exclude = frozenset(exclude)
    statuses = vcs_client.get_changes()  # type: ignore[attr-defined]
    diff_files = vcs_client.get_diff_files()  # type: ignore[attr-defined]

    changes = [change for change in statuses if not is_excluded(change.path, exclude)]
    eligible_files = [path for path in diff_files if not is_excluded(path, exclude)]
    logger.debug(
        "Found %d status entries and %d diff entries (%d and %d after exclusion)",
        len(statuses),
        len(diff_files),
        len(changes),
        len(eligible_files),
    )

    if not changes and not eligible_files:
        raise NoChangesError()

    return CollectedChanges(changes=changes, diffs=extract_diffs(vcs_client, eligible_files, exclude))
