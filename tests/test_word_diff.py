"""Tests for word-level diffing."""

from __future__ import annotations

import pytest

from treediff.diff.words import coalesce, diff_words
from treediff.models import EditOp, WordSegment


class TestDiffWords:
    """Test diff_words."""

    def test_single_word_replaced(self) -> None:
        """Should mark the whole word as removed then added."""
        assert diff_words("bar", "baz") == [
            WordSegment("removed", "bar"),
            WordSegment("added", "baz"),
        ]

    def test_middle_word_replaced(self) -> None:
        """Should keep shared words and whitespace as equal segments."""
        assert diff_words("the quick fox", "the slow fox") == [
            WordSegment("equal", "the "),
            WordSegment("removed", "quick"),
            WordSegment("added", "slow"),
            WordSegment("equal", " fox"),
        ]

    def test_identical_lines(self) -> None:
        """Should produce one equal segment."""
        assert diff_words("same line", "same line") == [WordSegment("equal", "same line")]

    def test_both_empty(self) -> None:
        """Should produce no segments."""
        assert diff_words("", "") == []

    def test_old_empty(self) -> None:
        """Should produce one added segment."""
        assert diff_words("", "new words") == [WordSegment("added", "new words")]

    def test_new_empty(self) -> None:
        """Should produce one removed segment."""
        assert diff_words("old words", "") == [WordSegment("removed", "old words")]

    def test_appended_argument(self) -> None:
        """Should isolate an appended token run."""
        segments = diff_words("call(a)", "call(a, b)")

        assert segments[0] == WordSegment("equal", "call(a")
        assert "".join(s.value for s in segments if s.kind != "added") == "call(a)"
        assert "".join(s.value for s in segments if s.kind != "removed") == "call(a, b)"

    @pytest.mark.parametrize(
        ("old", "new"),
        [
            ("return a + b;", "return a - b;"),
            ("x = compute(1, 2, 3)", "y = compute(3, 2, 1)"),
            ("  indent", "indent  "),
            ("alpha beta gamma", "delta epsilon"),
        ],
    )
    def test_no_adjacent_same_kind(self, old: str, new: str) -> None:
        """Should never emit two neighbouring segments of the same kind."""
        segments = diff_words(old, new)

        assert all(a.kind != b.kind for a, b in zip(segments, segments[1:]))
        assert "".join(s.value for s in segments if s.kind != "added") == old
        assert "".join(s.value for s in segments if s.kind != "removed") == new


class TestCoalesce:
    """Test coalesce."""

    def test_merges_runs(self) -> None:
        """Should concatenate values of neighbouring same-kind ops."""
        ops = [
            EditOp("equal", 0, 0, "a"),
            EditOp("equal", 1, 1, " "),
            EditOp("removed", 2, None, "b"),
            EditOp("removed", 3, None, "c"),
            EditOp("equal", 4, 2, "d"),
        ]

        assert coalesce(ops) == [
            WordSegment("equal", "a "),
            WordSegment("removed", "bc"),
            WordSegment("equal", "d"),
        ]

    def test_empty(self) -> None:
        """Should return an empty list."""
        assert coalesce([]) == []
