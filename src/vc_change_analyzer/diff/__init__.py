"""
Utilities for collecting diffs from version control systems.

The :mod:`vc_change_analyzer.diff.diff_extractor` module defines
functions for retrieving changed files and their unified diffs.
"""

from .diff_extractor import (  # noqa: F401
    CollectedChanges,
    NoChangesError,
    collect_changes,
    extract_diffs,
)
