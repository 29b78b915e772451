import unittest
from unittest.mock import Mock

from vc_change_analyzer.diff.diff_extractor import (
    CollectedChanges,
    NoChangesError,
    collect_changes,
    extract_diffs,
)
from vc_change_analyzer.grouping.change_model import DiffRecord
from vc_change_analyzer.vcs.git_client import FileChange, GitError


class DummyClient:
    def __init__(self, changes=None, diff_files=None, diffs=None):
        self.changes = changes or []
        self.diff_files = diff_files or []
        self.diffs = diffs or {}
        self.calls = []

    def get_changes(self):
        return self.changes

    def get_diff_files(self):
        return self.diff_files

    def get_diff(self, path):
        self.calls.append(path)
        return self.diffs.get(path, f"diff for {path}")


class TestExtractDiffs(unittest.TestCase):
    def test_extract_diffs_collects_all_in_order(self) -> None:
        client = DummyClient()
        records = extract_diffs(client, ["b.py", "a.txt"])
        self.assertEqual(
            records,
            [DiffRecord("b.py", "diff for b.py"), DiffRecord("a.txt", "diff for a.txt")],
        )
        self.assertEqual(client.calls, ["b.py", "a.txt"])

    def test_extract_diffs_skips_excluded_paths(self) -> None:
        client = DummyClient()
        records = extract_diffs(client, ["bun.lock", "dist/app.js", "src/app.ts"])
        self.assertEqual([r.file for r in records], ["src/app.ts"])
        self.assertEqual(client.calls, ["src/app.ts"])

    def test_extract_diffs_custom_exclusion_list(self) -> None:
        client = DummyClient()
        records = extract_diffs(client, ["bun.lock", "build/out.js"], exclude={"build"})
        self.assertEqual([r.file for r in records], ["bun.lock"])

    def test_extract_diffs_propagates_client_errors(self) -> None:
        mock_client = Mock()
        mock_client.get_diff.side_effect = GitError("fatal: bad revision")
        with self.assertRaises(GitError):
            extract_diffs(mock_client, ["file1.py"])
        mock_client.get_diff.assert_called_once_with("file1.py")

    def test_extract_diffs_empty(self) -> None:
        mock_client = Mock()
        self.assertEqual(extract_diffs(mock_client, []), [])
        mock_client.get_diff.assert_not_called()


class TestCollectChanges(unittest.TestCase):
    def test_collect_changes_returns_statuses_and_diffs(self) -> None:
        client = DummyClient(
            changes=[FileChange("a.py", "M"), FileChange("b.py", "A")],
            diff_files=["a.py"],
            diffs={"a.py": "+x\n"},
        )
        collected = collect_changes(client)
        self.assertEqual(collected.changes, [FileChange("a.py", "M"), FileChange("b.py", "A")])
        self.assertEqual(collected.diffs, [DiffRecord("a.py", "+x\n")])

    def test_collect_changes_raises_when_nothing_changed(self) -> None:
        with self.assertRaises(NoChangesError) as ctx:
            collect_changes(DummyClient())
        self.assertEqual(str(ctx.exception), "No changes detected to commit")

    def test_collect_changes_raises_when_everything_excluded(self) -> None:
        client = DummyClient(changes=[FileChange("bun.lock", "M")], diff_files=["bun.lock"])
        with self.assertRaises(NoChangesError):
            collect_changes(client)
        self.assertEqual(client.calls, [])

    def test_collect_changes_with_staged_changes_only(self) -> None:
        client = DummyClient(changes=[FileChange("a.py", "A")], diff_files=[])
        collected = collect_changes(client)
        self.assertEqual(collected.diffs, [])
        self.assertEqual(collected.diff_text, "")

    def test_collect_changes_drops_excluded_statuses(self) -> None:
        client = DummyClient(
            changes=[FileChange("dist/index.js", "M"), FileChange("src/index.ts", "M")],
            diff_files=["dist/index.js", "src/index.ts"],
        )
        collected = collect_changes(client)
        self.assertEqual([c.path for c in collected.changes], ["src/index.ts"])
        self.assertEqual(client.calls, ["src/index.ts"])

    def test_collect_changes_propagates_git_errors(self) -> None:
        mock_client = Mock()
        mock_client.get_changes.side_effect = GitError("fatal: not a git repository")
        with self.assertRaises(GitError):
            collect_changes(mock_client)


class TestCollectedChanges(unittest.TestCase):
    def test_diff_text_joins_diffs_in_order(self) -> None:
        collected = CollectedChanges(diffs=[DiffRecord("a", "+1"), DiffRecord("b", "-2")])
        self.assertEqual(collected.diff_text, "+1\n\n-2")


if __name__ == "__main__":
    unittest.main()
