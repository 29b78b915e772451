"""
Version control system (VCS) integration.

This package contains the read-only Git client used to list working-tree
changes and to obtain per-file unified diffs.
"""

from .git_client import FileChange, GitClient, GitError  # noqa: F401
