"""
Heuristic analysis of unified diff text.

The analyzer infers a Conventional Commit type, an optional scope and a
short description from the concatenated diffs of a change. It looks at
line counts and plain keyword occurrences only; it never parses the
changed code. Every lookup table is an ordered sequence of pairs and the
first match wins, so the outcome depends on table order alone and not on
where or how often a keyword occurs in the diff.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    TEST = "test"
    DOCS = "docs"
    REFACTOR = "refactor"
    CHORE = "chore"
    BUILD = "build"


class ChangeShape(str, Enum):
    MOSTLY_ADDITIONS = "mostly additions"
    MOSTLY_DELETIONS = "mostly deletions"
    MIXED = "mixed"


# Checked top to bottom; the first keyword present anywhere in the
# lower-cased diff decides the type. "fix" therefore beats "test" even
# when "test" appears earlier in the text.
TYPE_KEYWORDS: Tuple[Tuple[str, CommitType], ...] = (
    ("fix", CommitType.FIX),
    ("bug", CommitType.FIX),
    ("error", CommitType.FIX),
    ("test", CommitType.TEST),
    ("spec", CommitType.TEST),
    ("feature", CommitType.FEAT),
    ("add", CommitType.FEAT),
    ("new", CommitType.FEAT),
    ("update", CommitType.FEAT),
    ("refactor", CommitType.REFACTOR),
    ("improve", CommitType.REFACTOR),
    ("docs", CommitType.DOCS),
    ("readme", CommitType.DOCS),
    ("chore", CommitType.CHORE),
    ("config", CommitType.CHORE),
    ("build", CommitType.BUILD),
)

DEFAULT_TYPE = CommitType.FEAT

DEPENDENCY_FILES: Tuple[str, ...] = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lock",
    "requirements.txt",
    "pyproject.toml",
    "poetry.lock",
    "pipfile",
    "cargo.toml",
    "cargo.lock",
    "go.mod",
    "go.sum",
    "gemfile",
    "composer.json",
)

# `\b` keeps ".js" from matching inside ".json".
SOURCE_EXTENSION_RE: re.Pattern[str] = re.compile(
    r"\.(?:ts|tsx|js|jsx|mjs|cjs|py|go|rs|java|kt|rb|php|c|cc|cpp|h|hpp|cs|swift)\b"
)
DOCS_RE: re.Pattern[str] = re.compile(r"\.mdx?\b|readme")
TEST_MARKER_RE: re.Pattern[str] = re.compile(r"test|spec")

# (shape, has_tests) -> description. Tests only change the wording of
# additive and mixed changes.
DESCRIPTIONS: Tuple[Tuple[Tuple[ChangeShape, Optional[bool]], str], ...] = (
    ((ChangeShape.MOSTLY_ADDITIONS, True), "add tests and features"),
    ((ChangeShape.MOSTLY_ADDITIONS, False), "add new features"),
    ((ChangeShape.MOSTLY_DELETIONS, None), "remove unused code"),
    ((ChangeShape.MIXED, True), "update tests and code"),
    ((ChangeShape.MIXED, False), "update code"),
)


@dataclass(frozen=True)
class DiffAnalysis:
    """Outcome of analysing the diff text of one change."""

    type: CommitType
    scope: Optional[str]
    description: str

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"type": self.type.value, "scope": self.scope, "description": self.description}


def count_changed_lines(diff_text: str) -> Tuple[int, int]:
    """Return ``(additions, deletions)`` for unified diff text.

    File header lines (``--- a/...``/``+++ b/...``) are not counted. A
    header runs from a ``diff`` line, a blank separator line or the start
    of the text up to the first ``@@`` hunk marker, so hunk content such
    as ``+++i;`` is still counted as an addition.
    """
    additions = 0
    deletions = 0
    in_header = True
    for line in diff_text.splitlines():
        if not line or line.startswith("diff "):
            in_header = True
        elif line.startswith("@@"):
            in_header = False
        elif in_header and line.startswith(("+++", "---")):
            continue
        elif line.startswith("+"):
            additions += 1
        elif line.startswith("-"):
            deletions += 1
    return additions, deletions


def detect_commit_type(lowered: str) -> CommitType:
    for keyword, commit_type in TYPE_KEYWORDS:
        if keyword in lowered:
            return commit_type
    return DEFAULT_TYPE


def detect_scope(lowered: str) -> Optional[str]:
    """Infer the scope: ``deps`` over ``code`` over ``docs``, else None."""
    if any(name in lowered for name in DEPENDENCY_FILES):
        return "deps"
    if SOURCE_EXTENSION_RE.search(lowered):
        return "code"
    if DOCS_RE.search(lowered):
        return "docs"
    return None


def classify_shape(additions: int, deletions: int) -> ChangeShape:
    if additions > deletions * 2:
        return ChangeShape.MOSTLY_ADDITIONS
    if deletions > additions * 2:
        return ChangeShape.MOSTLY_DELETIONS
    return ChangeShape.MIXED


def has_test_markers(lowered: str) -> bool:
    return bool(TEST_MARKER_RE.search(lowered))


def describe_change(shape: ChangeShape, has_tests: bool) -> str:
    for (phrase_shape, needs_tests), description in DESCRIPTIONS:
        if phrase_shape is shape and (needs_tests is None or needs_tests == has_tests):
            return description
    raise ValueError(f"No description for shape {shape!r}")


def analyze_diff(diff_text: str) -> DiffAnalysis:
    """Derive type, scope and description from concatenated diff text.

    Parameters
    ----------
    diff_text : str
        Unified diffs of every changed file, joined together.

    Returns
    -------
    DiffAnalysis
        Identical input always yields an identical result.
    """
    additions, deletions = count_changed_lines(diff_text)
    lowered = diff_text.lower()

    commit_type = detect_commit_type(lowered)
    scope = detect_scope(lowered)
    shape = classify_shape(additions, deletions)
    description = describe_change(shape, has_test_markers(lowered))

    logger.debug(
        "Analyzed diff: +%d/-%d lines, shape=%s, type=%s, scope=%s",
        additions,
        deletions,
        shape.value,
        commit_type.value,
        scope,
    )
    return DiffAnalysis(type=commit_type, scope=scope, description=description)
