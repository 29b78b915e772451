"""
Rule-based analysis of diff content.

See :mod:`vc_change_analyzer.analysis.diff_analyzer`.
"""

from .diff_analyzer import ChangeShape, CommitType, DiffAnalysis, analyze_diff  # noqa: F401
