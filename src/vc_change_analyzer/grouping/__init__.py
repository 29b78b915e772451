"""
Grouping of changed files.

This package partitions changed files into the added, modified, deleted
and renamed categories. See :mod:`vc_change_analyzer.grouping.change_classifier`
and :mod:`vc_change_analyzer.grouping.change_model` for details.
"""

from .change_classifier import classify_changes  # noqa: F401
from .change_model import ChangeSet, DiffRecord  # noqa: F401
from .exclusion import DEFAULT_EXCLUDES, is_excluded  # noqa: F401
