"""
Commit message rendering.

See :mod:`vc_change_analyzer.message.formatter`.
"""

from .formatter import CommitMessageStyle, format_commit_message  # noqa: F401
