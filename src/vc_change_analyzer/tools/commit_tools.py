"""
Entry points of the change analyzer.

:func:`get_file_changes_in_directory` returns the raw per-file diffs of a
working tree. :func:`generate_commit_message` runs the whole pipeline:
diff collection, change classification, diff analysis and message
formatting. Neither raises: failures come back as :class:`AnalysisFailed`
and every other outcome is one of the result types below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from vc_change_analyzer.analysis.diff_analyzer import DiffAnalysis, analyze_diff
from vc_change_analyzer.diff.diff_extractor import (
    NO_CHANGES_MESSAGE,
    NoChangesError,
    collect_changes,
    extract_diffs,
)
from vc_change_analyzer.grouping.change_classifier import classify_changes
from vc_change_analyzer.grouping.change_model import ChangeSet, DiffRecord
from vc_change_analyzer.grouping.exclusion import DEFAULT_EXCLUDES
from vc_change_analyzer.message.formatter import CommitMessageStyle, format_commit_message
from vc_change_analyzer.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


FAILURE_PREFIX = "Failed to analyze changes: "


@dataclass(frozen=True)
class CommitMessageGenerated:
    """A commit message was produced."""

    message: str
    changes: ChangeSet
    analysis: DiffAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "changes": self.changes.to_dict(),
            "analysis": self.analysis.to_dict(),
            "summary": self.changes.summary(),
        }


@dataclass(frozen=True)
class NoChanges:
    """The working tree holds nothing to analyze. Not a failure."""

    error: str = NO_CHANGES_MESSAGE
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"message": None, "error": self.error}


@dataclass(frozen=True)
class AnalysisFailed:
    """Reading the working tree failed."""

    error: str
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"message": None, "error": self.error}


CommitMessageResult = Union[CommitMessageGenerated, NoChanges, AnalysisFailed]
FileChangesResult = Union[List[DiffRecord], AnalysisFailed]


def get_file_changes_in_directory(
    root_dir: str,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> FileChangesResult:
    """Return the diff of every non-excluded file with working-tree changes.

    An empty working tree gives an empty list. When the directory cannot
    be read as a Git working tree the result is :class:`AnalysisFailed`.
    """
    client = GitClient(Path(root_dir))
    try:
        return extract_diffs(client, client.get_diff_files(), exclude)
    except GitError as exc:
        logger.error("Failed to read diffs in %s: %s", root_dir, exc)
        return AnalysisFailed(error=f"{FAILURE_PREFIX}{exc}")
    except Exception as exc:
        logger.exception("Unexpected error while reading diffs in %s", root_dir)
        return AnalysisFailed(error=f"{FAILURE_PREFIX}{exc}")


def generate_commit_message(
    root_dir: str,
    style: Union[CommitMessageStyle, str] = CommitMessageStyle.CONVENTIONAL,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> CommitMessageResult:
    """Analyze the working tree at ``root_dir`` and propose a commit message.

    Parameters
    ----------
    root_dir : str
        Directory inside the Git working tree to inspect.
    style : CommitMessageStyle or str
        Rendering style, ``conventional`` by default.
    exclude : Iterable[str]
        Exclusion list applied to every reported path.

    Returns
    -------
    CommitMessageResult
        :class:`CommitMessageGenerated` on success, :class:`NoChanges`
        when there is nothing to analyze and :class:`AnalysisFailed` when
        the style is unknown or the working tree cannot be read. Callers
        branch on the type (or on ``message is None``) instead of catching
        exceptions.
    """
    try:
        style = CommitMessageStyle(style)
    except ValueError as exc:
        logger.error("Unknown commit message style: %s", style)
        return AnalysisFailed(error=f"{FAILURE_PREFIX}{exc}")

    client = GitClient(Path(root_dir))

    try:
        collected = collect_changes(client, exclude)
    except NoChangesError as exc:
        logger.info("No changes to analyze in %s", root_dir)
        return NoChanges(error=str(exc))
    except GitError as exc:
        logger.error("Failed to read changes in %s: %s", root_dir, exc)
        return AnalysisFailed(error=f"{FAILURE_PREFIX}{exc}")
    except Exception as exc:
        logger.exception("Unexpected error while reading changes in %s", root_dir)
        return AnalysisFailed(error=f"{FAILURE_PREFIX}{exc}")

    changes = classify_changes(collected.changes, exclude)
    analysis = analyze_diff(collected.diff_text)
    message = format_commit_message(changes, analysis, style)
    logger.debug("Generated %s commit message: %s", style.value, message)
    return CommitMessageGenerated(message=message, changes=changes, analysis=analysis)
