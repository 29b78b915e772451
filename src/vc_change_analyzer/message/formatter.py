"""
Rendering of commit messages.

Three styles are supported:

``conventional``
  ``type(scope): description`` followed by either the single changed
  path (`` in path``) or a file-count clause such as
  ``(1 file added, 2 files modified)``. Renamed files count towards the
  total but are never listed in the clause.

``simple``
  The description with its first letter capitalised.

``detailed``
  The capitalised description, then a ``Files changed:`` section with one
  bullet per non-empty category.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from vc_change_analyzer.analysis.diff_analyzer import DiffAnalysis
from vc_change_analyzer.grouping.change_model import ChangeSet


class CommitMessageStyle(str, Enum):
    CONVENTIONAL = "conventional"
    SIMPLE = "simple"
    DETAILED = "detailed"


# Categories shown in the conventional count clause. "renamed" is left
# out on purpose.
COUNTED_CATEGORIES: Tuple[str, ...] = ("added", "modified", "deleted")

DETAILED_LABELS: Tuple[Tuple[str, str], ...] = (
    ("added", "Added"),
    ("modified", "Modified"),
    ("deleted", "Deleted"),
    ("renamed", "Renamed"),
)


def _capitalize(text: str) -> str:
    # str.capitalize() would lower-case the rest of the text
    return text[:1].upper() + text[1:]


def _count_phrase(count: int, verb: str) -> str:
    return f"{count} file{'s' if count > 1 else ''} {verb}"


def format_conventional(changes: ChangeSet, analysis: DiffAnalysis) -> str:
    scope = f"({analysis.scope})" if analysis.scope else ""
    message = f"{analysis.type.value}{scope}: {analysis.description}"

    if changes.total == 1:
        return f"{message} in {changes.all_paths()[0]}"

    parts: List[str] = []
    for category in COUNTED_CATEGORIES:
        count = len(changes.category(category))
        if count:
            parts.append(_count_phrase(count, category))
    if parts:
        message = f"{message} ({', '.join(parts)})"
    return message


def format_simple(changes: ChangeSet, analysis: DiffAnalysis) -> str:
    return _capitalize(analysis.description)


def format_detailed(changes: ChangeSet, analysis: DiffAnalysis) -> str:
    lines = [_capitalize(analysis.description)]
    bullets = [
        f"- {label}: {', '.join(changes.category(category))}"
        for category, label in DETAILED_LABELS
        if changes.category(category)
    ]
    if bullets:
        lines.append("")
        lines.append("Files changed:")
        lines.extend(bullets)
    return "\n".join(lines)


_FORMATTERS = {
    CommitMessageStyle.CONVENTIONAL: format_conventional,
    CommitMessageStyle.SIMPLE: format_simple,
    CommitMessageStyle.DETAILED: format_detailed,
}


def format_commit_message(
    changes: ChangeSet,
    analysis: DiffAnalysis,
    style: CommitMessageStyle = CommitMessageStyle.CONVENTIONAL,
) -> str:
    """Render ``changes`` and ``analysis`` as a commit message in ``style``.

    ``style`` may also be given as its string value.
    """
    return _FORMATTERS[CommitMessageStyle(style)](changes, analysis)
