"""Tests for LineClassifier."""

import pytest

from locscan.scanning import CommentMarkers, FileReport, LineClassifier, LineKind

B, C, K = LineKind.BLANK, LineKind.COMMENT, LineKind.CODE


def _kinds(markers, lines):
    return list(LineClassifier(markers).classify(lines))


class TestBasicClassification:
    def test_code_comment_blank(self, hash_markers):
        assert _kinds(hash_markers, ["x = 1", "# note", ""]) == [K, C, B]

    def test_whitespace_only_is_blank(self, hash_markers):
        assert _kinds(hash_markers, ["   ", "\t", " \t \r"]) == [B, B, B]

    def test_nul_and_form_feed_are_whitespace(self, hash_markers):
        assert _kinds(hash_markers, ["\x00", "\f\v", "\x00  # x"]) == [B, B, C]

    def test_unicode_space_is_not_whitespace(self, hash_markers):
        assert _kinds(hash_markers, ["\u00a0", "\u2028", "\u00a0# x"]) == [K, K, K]

    def test_indented_comment(self, hash_markers):
        assert _kinds(hash_markers, ["    # indented"]) == [C]

    def test_trailing_comment_is_code(self, hash_markers):
        assert _kinds(hash_markers, ["x = 1  # trailing"]) == [K]

    def test_multiple_line_markers(self):
        markers = CommentMarkers(line_markers=("#", "--"), block_start="(*", block_end="*)")
        assert _kinds(markers, ["-- a", "# b", "set x to 1"]) == [C, C, K]

    def test_empty_input(self, hash_markers):
        report = LineClassifier(hash_markers).count("empty.py", [])
        assert report == FileReport(path="empty.py")
        assert report.total_lines == 0


class TestBlockComments:
    def test_ruby_reference_case(self, ruby_markers):
        lines = ["=begin", "hidden", "=end", "# cmt", "", "code();"]
        assert _kinds(ruby_markers, lines) == [C, C, C, C, B, K]

        report = LineClassifier(ruby_markers).count("x.rb", lines)
        assert report.code_lines == 1
        assert report.comment_lines == 4
        assert report.blank_lines == 1

    def test_single_line_block_closes_itself(self, c_markers):
        assert _kinds(c_markers, ["/* note */", "int x;"]) == [C, K]

    def test_multiline_block(self, c_markers):
        lines = ["/*", " * body", " */", "int x;"]
        assert _kinds(c_markers, lines) == [C, C, C, K]

    def test_blank_inside_block_stays_blank(self, c_markers):
        lines = ["/*", "", "   ", "text", "*/"]
        assert _kinds(c_markers, lines) == [C, B, B, C, C]

    def test_code_after_block_end_on_same_line_is_comment(self, c_markers):
        # The whole line counts once, as a comment.
        assert _kinds(c_markers, ["/* a */ int x;"]) == [C]

    def test_block_end_without_open_block_is_code(self, c_markers):
        assert _kinds(c_markers, ["*/"]) == [K]

    def test_line_comment_ending_with_block_end_does_not_open(self, c_markers):
        assert _kinds(c_markers, ["// see */", "int x;"]) == [C, K]

    def test_unterminated_block_runs_to_end(self, c_markers):
        assert _kinds(c_markers, ["/*", "int x;", "int y;"]) == [C, C, C]

    def test_line_marker_prefix_of_block_start_enters_block(self):
        markers = CommentMarkers(line_markers=("--",), block_start="--[[", block_end="]]")
        assert _kinds(markers, ["--[[", "hidden", "]]", "x = 1"]) == [C, C, C, K]

    def test_line_marker_inside_block_does_not_close(self, ruby_markers):
        assert _kinds(ruby_markers, ["=begin", "# inner", "still", "=end", "x"]) == [C, C, C, C, K]

    def test_equal_block_markers_close_on_same_line(self):
        markers = CommentMarkers(line_markers=("#",), block_start='"""', block_end='"""')
        assert _kinds(markers, ['"""Doc."""', "x = 1"]) == [C, K]
        assert _kinds(markers, ['"""Summary', "more", '"""', "x = 1"]) == [C, C, C, K]


class TestStateIsPerCall:
    def test_block_state_does_not_leak_between_files(self, c_markers):
        classifier = LineClassifier(c_markers)
        first = classifier.count("a.c", ["/*", "open"])
        second = classifier.count("b.c", ["int x;"])
        assert first.comment_lines == 2
        assert second.code_lines == 1


@pytest.mark.parametrize(
    "lines",
    [
        ["/*", "", "x", "*/", "y", "// z", "   "],
        ["", "", ""],
        ["a", "b", "/* c */", "d"],
        ["/* never closed", "x", "", "y"],
    ],
)
def test_partition_is_complete(c_markers, lines):
    report = LineClassifier(c_markers).count("f.c", lines)
    assert report.total_lines == len(lines)
