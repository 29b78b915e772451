"""Tests for the rule-based diff analyzer."""

import unittest

from vc_change_analyzer.analysis.diff_analyzer import (
    ChangeShape,
    CommitType,
    DiffAnalysis,
    analyze_diff,
    classify_shape,
    count_changed_lines,
    describe_change,
    detect_commit_type,
    detect_scope,
    has_test_markers,
)


PYTHON_DIFF = """diff --git a/src/app.py b/src/app.py
--- a/src/app.py
+++ b/src/app.py
@@ -1,2 +1,2 @@
-x = 1
+x = 2
 y = 3
"""


class TestLineCounting(unittest.TestCase):
    def test_headers_are_not_counted(self):
        self.assertEqual(count_changed_lines(PYTHON_DIFF), (1, 1))

    def test_counts_across_concatenated_diffs(self):
        text = "--- a/x\n+++ b/x\n+a\n+b\n-c\n context\n\n--- a/y\n+++ b/y\n+d\n"
        self.assertEqual(count_changed_lines(text), (3, 1))

    def test_empty_text(self):
        self.assertEqual(count_changed_lines(""), (0, 0))

    def test_hunk_lines_that_look_like_headers_are_counted(self):
        cases = [
            ("--- a/x.c\n+++ b/x.c\n@@ -1 +1,2 @@\n+++i;\n+++j;\n", (2, 0)),
            ("--- a/x.c\n+++ b/x.c\n@@ -1,2 +1 @@\n---i;\n--j;\n", (0, 2)),
            ("--- a/doc.md\n+++ b/doc.md\n@@ -1 +1 @@\n----\n+---\n", (1, 1)),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(count_changed_lines(text), expected)

    def test_header_of_second_file_is_skipped_after_hunks(self):
        text = (
            "diff --git a/x.c b/x.c\n--- a/x.c\n+++ b/x.c\n@@ -1 +1 @@\n-a\n+b\n"
            "\n"
            "diff --git a/y.c b/y.c\nnew file mode 100644\n--- /dev/null\n+++ b/y.c\n@@ -0,0 +1 @@\n+++c;\n"
        )
        self.assertEqual(count_changed_lines(text), (2, 1))

    def test_increment_lines_shape_the_description(self):
        diff = "--- a/x.c\n+++ b/x.c\n@@ -1 +1,3 @@\n+++i;\n+++j;\n+++k;\n"
        self.assertEqual(analyze_diff(diff).description, "add new features")


class TestCommitType(unittest.TestCase):
    def test_keyword_table(self):
        cases = [
            ("+repair crash after error", CommitType.FIX),
            ("+a bug in parsing", CommitType.FIX),
            ("+assert test_value", CommitType.TEST),
            ("+describe spec", CommitType.TEST),
            ("+feature flag", CommitType.FEAT),
            ("+refactor helper", CommitType.REFACTOR),
            ("+improve speed", CommitType.REFACTOR),
            ("+see docs", CommitType.DOCS),
            ("+bump config", CommitType.CHORE),
            ("+build step", CommitType.BUILD),
            ("+hello world", CommitType.FEAT),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(detect_commit_type(text.lower()), expected)

    def test_table_order_beats_text_order(self):
        for text in ("+test the fix\n", "+fix the test\n", "+test\n+test\n+test\n+fix\n"):
            with self.subTest(text=text):
                self.assertEqual(detect_commit_type(text.lower()), CommitType.FIX)

    def test_update_loses_to_test(self):
        self.assertEqual(detect_commit_type("+update the test"), CommitType.TEST)

    def test_matching_is_case_insensitive(self):
        self.assertEqual(analyze_diff("+Refactor Helper\n").type, CommitType.REFACTOR)


class TestScope(unittest.TestCase):
    def test_scope_cases(self):
        cases = [
            ("diff --git a/package.json b/package.json", "deps"),
            ("+++ b/requirements.txt", "deps"),
            ("+++ b/src/app.ts", "code"),
            ("+++ b/main.go", "code"),
            ("+++ b/tsconfig.json", None),
            ("+++ b/readme.md", "docs"),
            ("+++ b/guide.md", "docs"),
            ("+plain text", None),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(detect_scope(text), expected)

    def test_scope_priority(self):
        self.assertEqual(detect_scope("package.json index.ts readme.md"), "deps")
        self.assertEqual(detect_scope("index.ts readme.md"), "code")


class TestShape(unittest.TestCase):
    def test_thresholds(self):
        cases = [
            (3, 1, ChangeShape.MOSTLY_ADDITIONS),
            (1, 0, ChangeShape.MOSTLY_ADDITIONS),
            (2, 1, ChangeShape.MIXED),
            (1, 1, ChangeShape.MIXED),
            (1, 2, ChangeShape.MIXED),
            (0, 0, ChangeShape.MIXED),
            (1, 3, ChangeShape.MOSTLY_DELETIONS),
            (0, 1, ChangeShape.MOSTLY_DELETIONS),
        ]
        for additions, deletions, expected in cases:
            with self.subTest(additions=additions, deletions=deletions):
                self.assertEqual(classify_shape(additions, deletions), expected)

    def test_test_markers(self):
        self.assertTrue(has_test_markers("tests/test_app.py"))
        self.assertTrue(has_test_markers("app.spec.ts"))
        self.assertFalse(has_test_markers("src/app.py"))


class TestDescription(unittest.TestCase):
    def test_phrase_table(self):
        cases = [
            (ChangeShape.MOSTLY_ADDITIONS, True, "add tests and features"),
            (ChangeShape.MOSTLY_ADDITIONS, False, "add new features"),
            (ChangeShape.MOSTLY_DELETIONS, True, "remove unused code"),
            (ChangeShape.MOSTLY_DELETIONS, False, "remove unused code"),
            (ChangeShape.MIXED, True, "update tests and code"),
            (ChangeShape.MIXED, False, "update code"),
        ]
        for shape, has_tests, expected in cases:
            with self.subTest(shape=shape, has_tests=has_tests):
                self.assertEqual(describe_change(shape, has_tests), expected)


class TestAnalyzeDiff(unittest.TestCase):
    def test_additions_without_keywords(self):
        analysis = analyze_diff("+hello\n+world\n")
        self.assertEqual(analysis, DiffAnalysis(CommitType.FEAT, None, "add new features"))

    def test_source_change(self):
        analysis = analyze_diff(PYTHON_DIFF)
        self.assertEqual(analysis, DiffAnalysis(CommitType.FEAT, "code", "update code"))

    def test_removals_with_tests(self):
        diff = "--- a/tests/test_old.py\n+++ b/tests/test_old.py\n-a\n-b\n-c\n"
        analysis = analyze_diff(diff)
        self.assertEqual(analysis.type, CommitType.TEST)
        self.assertEqual(analysis.scope, "code")
        self.assertEqual(analysis.description, "remove unused code")

    def test_idempotent(self):
        self.assertEqual(analyze_diff(PYTHON_DIFF), analyze_diff(PYTHON_DIFF))

    def test_to_dict(self):
        self.assertEqual(
            DiffAnalysis(CommitType.FIX, None, "update code").to_dict(),
            {"type": "fix", "scope": None, "description": "update code"},
        )


if __name__ == "__main__":
    unittest.main()
