"""
Git client implementation for vc_change_analyzer.

This module wraps the read-only Git queries required by the change
analyzer: the working-tree status and per-file unified diffs. It never
stages, commits or otherwise mutates the repository. All subprocess
calls go through :meth:`GitClient._run` so that unit tests can mock them
easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


@dataclass(frozen=True)
class FileChange:
    """Representation of a single file change in the working tree."""

    path: str
    status: str  # e.g. 'M' modified, 'A' added, 'D' deleted, 'R' renamed
    original_path: Optional[str] = None


class GitError(Exception):
    """Raised when a Git command fails or cannot be executed."""

    pass


class GitClient:
    """Read-only client for a Git working tree.

    Path listings are requested with ``-z`` so that Git reports names
    verbatim, NUL separated, instead of C-quoting non-ASCII or unusual
    characters.
    """

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    def _run(self, args: List[str]) -> str:
        """Run a read-only Git query in ``repo_root`` and return its stdout.

        Raises
        ------
        GitError
            If Git cannot be started in ``repo_root`` (missing executable,
            missing directory, permission failure), if its output cannot
            be decoded, or if the query exits with a non-zero status.
        """
        full_cmd = ["git"] + args
        logger.debug("Querying Git: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except UnicodeDecodeError as e:
            logger.error("Unicode decode error in Git output: %s", e)
            raise GitError(f"Failed to decode Git output: {e}") from e
        except OSError as e:
            logger.error("Unable to run Git in %s: %s", self.repo_root, e)
            raise GitError(f"Unable to run git in {self.repo_root}: {e}") from e

        if result.returncode != 0:
            logger.error("Git query %s failed with exit code %d: %s",
                         " ".join(full_cmd), result.returncode, result.stderr.strip())
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result.stdout

    def get_changes(self) -> List[FileChange]:
        """Get the list of changed files in the working tree.

        Parses ``git status --porcelain -z``. Untracked files (status
        ``??``) are excluded. The status is the first non-space column of
        the two-letter code, so a staged code wins over the working-tree
        code. A rename or copy entry is followed by an extra field holding
        the source path; the reported path is the new one and the source
        is kept in ``original_path``.

        Raises
        ------
        GitError
            If the git status command fails.
        """
        fields = self._run(["status", "--porcelain", "-z"]).split("\0")
        changes: List[FileChange] = []

        index = 0
        while index < len(fields):
            entry = fields[index]
            index += 1
            # XY + space + filename
            if len(entry) < 4:
                continue

            status_code = entry[:2]
            path = entry[3:]

            original_path: Optional[str] = None
            if "R" in status_code or "C" in status_code:
                if index < len(fields):
                    original_path = fields[index]
                index += 1

            status = status_code.strip()
            if status_code == "??" or not status:
                continue
            changes.append(FileChange(path=path, status=status[0], original_path=original_path))

        return changes

    def get_diff_files(self) -> List[str]:
        """Return the files whose working-tree content differs from the index.

        Paths are relative to the repository root, in the order Git
        reports them.
        """
        output = self._run(["diff", "--name-only", "-z"])
        return [path for path in output.split("\0") if path]

    def get_diff(self, file_path: str) -> str:
        """Return the unified working-tree diff for one file.

        ``file_path`` is relative to the repository root. The ``top`` magic
        keeps that true when ``repo_root`` is a subdirectory and ``literal``
        stops glob characters in the name from matching other files.
        """
        return self._run(["diff", "--", f":(top,literal){file_path}"])
