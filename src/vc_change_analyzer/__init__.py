"""
Top-level package for vc_change_analyzer.

This package derives a structured change summary and a commit message
from the working-tree changes of a Git repository using deterministic
rules. The CLI entry point lives in ``vc_change_analyzer.cli``; tool
hosts use ``vc_change_analyzer.tools``.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
