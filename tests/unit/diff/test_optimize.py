"""Unit tests for merging similar lines into changed lines."""

import pytest

from codediffs.diff.alignment import diff_lines
from codediffs.diff.code_diff import DiffEntry, DiffTag
from codediffs.diff.code_text import CodeText
from codediffs.diff.optimize import (
    get_distance_metric,
    levenshtein_distance,
    optimize_line_changes,
    sequence_matcher_distance,
)
from codediffs.exceptions import ValidationError


def _diff(left: list[str], right: list[str]):
    return diff_lines(CodeText.from_lines(left), CodeText.from_lines(right))


@pytest.mark.unit
class TestLevenshteinDistance:
    """Tests for levenshtein_distance function."""

    def test_identical(self):
        """Test identical lines have no distance."""
        assert levenshtein_distance("ret i64 %1", "ret i64 %1") == 0.0
        assert levenshtein_distance("", "") == 0.0

    def test_one_side_empty(self):
        """Test an empty line is as far as possible from any other."""
        assert levenshtein_distance("abc", "") == 1.0
        assert levenshtein_distance("", "abc") == 1.0

    def test_normalized_by_longer_line(self):
        """Test the edit count is divided by the longer length."""
        assert levenshtein_distance("kitten", "sitting") == pytest.approx(3 / 7)
        assert levenshtein_distance("  ret i64 %1", "  ret i64 %2") == pytest.approx(1 / 12)

    def test_symmetric(self):
        """Test the distance does not depend on argument order."""
        a, b = "  %1 = add i64 %0, 1", "  %2 = add nsw i64 %1, 1"
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a) == pytest.approx(6 / 24)

    def test_completely_different(self):
        """Test lines without common characters."""
        assert levenshtein_distance("abc", "xyz") == 1.0


@pytest.mark.unit
class TestSequenceMatcherDistance:
    """Tests for sequence_matcher_distance function."""

    def test_identical(self):
        """Test identical lines have no distance."""
        assert sequence_matcher_distance("abcd", "abcd") == 0.0

    def test_one_character_changed(self):
        """Test one minus the similarity ratio."""
        assert sequence_matcher_distance("abcd", "abce") == pytest.approx(0.25)

    def test_lookup_by_name(self):
        """Test metrics are available by name."""
        assert get_distance_metric("difflib") is sequence_matcher_distance
        assert get_distance_metric("levenshtein") is levenshtein_distance

    def test_unknown_name(self):
        """Test unknown metric names are rejected."""
        with pytest.raises(ValidationError, match="Unknown distance metric"):
            get_distance_metric("hamming")


@pytest.mark.unit
class TestOptimizeLineChanges:
    """Tests for optimize_line_changes function."""

    def test_similar_lines_merged(self):
        """Test a removed and an added similar line become a changed line."""
        diff = optimize_line_changes(_diff(["a = 1"], ["a = 2"]))
        assert diff.entries == (DiffEntry.changed(0, 0),)

    def test_dissimilar_lines_kept(self):
        """Test lines below the tolerance stay removed and added."""
        diff = optimize_line_changes(_diff(["foo"], ["completely different"]))
        assert diff.entries == (DiffEntry.removed(0), DiffEntry.added(0))

    def test_positional_pairing(self):
        """Test a run of similar lines is paired in order."""
        diff = optimize_line_changes(_diff(["x = 1", "y = 1"], ["x = 2", "y = 2"]))
        assert diff.entries == (DiffEntry.changed(0, 0), DiffEntry.changed(1, 1))

    def test_added_line_before_pair(self):
        """Test an added line without a similar partner stays in front of the pair."""
        diff = optimize_line_changes(_diff(["  ret i64 %1"], ["  %1 = sext i8 %0 to i64", "  ret i64 %2"]))
        assert diff.entries == (DiffEntry.added(0), DiffEntry.changed(0, 1))

    def test_removed_line_left_over(self):
        """Test removed lines without a partner stay after the pairs."""
        diff = optimize_line_changes(_diff(["x = 1", "something else"], ["x = 2"]))
        assert diff.entries == (DiffEntry.changed(0, 0), DiffEntry.removed(1))

    def test_unchanged_lines_untouched(self):
        """Test runs are only formed between unchanged lines."""
        diff = optimize_line_changes(_diff(["a", "x = 1", "b"], ["a", "x = 2", "b"]))
        assert [entry.tag for entry in diff.entries] == [DiffTag.UNCHANGED, DiffTag.CHANGED, DiffTag.UNCHANGED]

    def test_removals_only(self):
        """Test removals without following additions are kept."""
        diff = optimize_line_changes(_diff(["a", "b"], ["a"]))
        assert diff.entries == (DiffEntry.unchanged(0, 0), DiffEntry.removed(1))

    def test_additions_only(self):
        """Test additions without preceding removals are kept."""
        diff = optimize_line_changes(_diff([], ["a", "b"]))
        assert diff.entries == (DiffEntry.added(0), DiffEntry.added(1))

    def test_llvm_body(self):
        """Test merging the body of two LLVM functions."""
        left = ["top:", "  %1 = add i64 %0, 1", "  ret i64 %1", "}"]
        right = ["top:", "  %1 = sext i8 %0 to i64", "  %2 = add nsw i64 %1, 1", "  ret i64 %2", "}"]
        diff = optimize_line_changes(_diff(left, right))
        assert diff.entries == (
            DiffEntry.unchanged(0, 0),
            DiffEntry.added(1),
            DiffEntry.changed(1, 2),
            DiffEntry.changed(2, 3),
            DiffEntry.unchanged(3, 4),
        )

    def test_original_diff_untouched(self):
        """Test the optimization returns a new diff."""
        diff = _diff(["a = 1"], ["a = 2"])
        optimized = optimize_line_changes(diff)
        assert optimized is not diff
        assert diff.entries == (DiffEntry.removed(0), DiffEntry.added(0))

    def test_idempotent(self):
        """Test optimizing twice gives the same diff."""
        diff = _diff(["a", "x = 1", "zzz", "y = 1"], ["a", "x = 2", "qq", "y = 3", "tail"])
        once = optimize_line_changes(diff)
        assert optimize_line_changes(once) == once

    def test_tolerance_one_merges_nothing_different(self):
        """Test a tolerance of 1 requires identical lines."""
        diff = optimize_line_changes(_diff(["a = 1"], ["a = 2"]), tolerance=1.0)
        assert diff.count(DiffTag.CHANGED) == 0

    def test_tolerance_zero_merges_everything(self):
        """Test a tolerance of 0 pairs any lines."""
        diff = optimize_line_changes(_diff(["abc"], ["xyz"]), tolerance=0.0)
        assert diff.entries == (DiffEntry.changed(0, 0),)

    def test_distance_by_name(self):
        """Test the metric can be given by name."""
        diff = optimize_line_changes(_diff(["abcd"], ["abce"]), distance="difflib")
        assert diff.entries == (DiffEntry.changed(0, 0),)

    def test_custom_distance(self):
        """Test any callable can be used as metric."""
        diff = optimize_line_changes(_diff(["a"], ["b"]), distance=lambda a, b: 0.0)
        assert diff.entries == (DiffEntry.changed(0, 0),)

    @pytest.mark.parametrize("tolerance", [-0.1, 1.5])
    def test_invalid_tolerance(self, tolerance):
        """Test tolerances outside [0, 1] are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            optimize_line_changes(_diff(["a"], ["b"]), tolerance=tolerance)
        assert exc_info.value.parameter_name == "tolerance"
