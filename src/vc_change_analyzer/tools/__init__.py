"""
Externally invocable operations.

:mod:`vc_change_analyzer.tools.commit_tools` holds the entry points and
their result types; :mod:`vc_change_analyzer.tools.definitions` wraps
them as schema-validated tools for tool hosts.
"""

from .commit_tools import (  # noqa: F401
    AnalysisFailed,
    CommitMessageGenerated,
    CommitMessageResult,
    FileChangesResult,
    NoChanges,
    generate_commit_message,
    get_file_changes_in_directory,
)
from .definitions import ToolDefinition, ToolInputError, build_tools, invoke_tool  # noqa: F401
