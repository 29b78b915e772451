"""
Exclusion list handling.

Paths on the exclusion list never take part in change analysis: they are
dropped by the diff collector and by the change classifier alike.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable


# Build output and lock files never describe the intent of a change.
DEFAULT_EXCLUDES: FrozenSet[str] = frozenset({"dist", "bun.lock"})


def is_excluded(path: str, exclude: Iterable[str]) -> bool:
    """Return True if ``path`` is listed in ``exclude`` or lies beneath an entry.

    >>> is_excluded("dist/app.js", {"dist"})
    True
    >>> is_excluded("distance.py", {"dist"})
    False
    """
    for entry in exclude:
        entry = entry.rstrip("/")
        if not entry:
            continue
        if path == entry or path.startswith(entry + "/"):
            return True
    return False
