"""Tests for chunk grouping and folding."""

from __future__ import annotations

import pytest

from treediff.diff.chunks import Fold, chunkify, expand_fold, fold_chunk, should_fold
from treediff.diff.lines import diff_lines
from treediff.models import Chunk, DiffLine


def _unchanged(count: int, offset: int = 0) -> list[DiffLine]:
    return [DiffLine("unchanged", i + 1, i + 1, f"line {i}") for i in range(offset, offset + count)]


class TestChunkify:
    """Test chunkify."""

    def test_empty(self) -> None:
        """Should return no chunks."""
        assert chunkify([]) == []

    def test_single_change(self) -> None:
        """Should split around the changed run."""
        diff = diff_lines("foo\nbar\n", "foo\nbaz\n")

        chunks = chunkify(diff.lines)

        assert [(c.kind, c.start, len(c.lines)) for c in chunks] == [
            ("unchanged", 0, 1),
            ("changed", 1, 2),
            ("unchanged", 3, 1),
        ]
        assert [line.content for line in chunks[1].lines] == ["bar", "baz"]

    def test_removed_and_added_merge(self) -> None:
        """Should keep interleaved removed and added lines in one changed chunk."""
        lines = [
            DiffLine("removed", 1, None, "a"),
            DiffLine("added", None, 1, "b"),
            DiffLine("removed", 2, None, "c"),
            DiffLine("added", None, 2, "d"),
        ]

        chunks = chunkify(lines)

        assert len(chunks) == 1
        assert chunks[0].kind == "changed"
        assert chunks[0].lines == tuple(lines)

    def test_all_unchanged(self) -> None:
        """Should produce a single unchanged chunk."""
        lines = _unchanged(5)

        assert chunkify(lines) == [Chunk("unchanged", 0, tuple(lines))]

    @pytest.mark.parametrize(
        ("old", "new"),
        [
            ("a\nb\nc\nd\ne\nf", "a\nX\nc\nd\nY\nf\ng"),
            ("", "new\nfile\n"),
            ("x\n" * 20, "x\n" * 10 + "y\n" + "x\n" * 10),
        ],
    )
    def test_chunks_cover_diff(self, old: str, new: str) -> None:
        """Should reproduce the diff exactly once, with homogeneous non-empty chunks."""
        lines = diff_lines(old, new).lines

        chunks = chunkify(lines)

        assert [line for chunk in chunks for line in chunk.lines] == lines
        for chunk in chunks:
            assert chunk.lines
            assert lines[chunk.start : chunk.end] == list(chunk.lines)
            if chunk.kind == "unchanged":
                assert all(line.kind == "unchanged" for line in chunk.lines)
            else:
                assert all(line.kind != "unchanged" for line in chunk.lines)
        assert all(a.kind != b.kind for a, b in zip(chunks, chunks[1:]))


class TestFolding:
    """Test should_fold, fold_chunk and expand_fold."""

    def test_fold_long_unchanged_chunk(self) -> None:
        """Should show three lines each side of a fold marker."""
        chunk = Chunk("unchanged", 0, tuple(_unchanged(10)))

        rows = fold_chunk(chunk, 3)

        assert rows == [0, 1, 2, Fold(3, 4), 7, 8, 9]

    def test_threshold_not_folded(self) -> None:
        """Should show chunks of 2C+2 lines in full."""
        chunk = Chunk("unchanged", 0, tuple(_unchanged(8)))

        assert not should_fold(chunk, 3)
        assert fold_chunk(chunk, 3) == list(range(8))

    def test_just_over_threshold(self) -> None:
        """Should hide total - 2C lines."""
        chunk = Chunk("unchanged", 0, tuple(_unchanged(9)))

        rows = fold_chunk(chunk)

        assert Fold(3, 3) in rows
        assert len(rows) == 7

    def test_changed_chunk_never_folded(self) -> None:
        """Should always show changed chunks in full."""
        lines = tuple(DiffLine("added", None, i + 1, str(i)) for i in range(20))
        chunk = Chunk("changed", 0, lines)

        assert not should_fold(chunk)
        assert fold_chunk(chunk) == list(range(20))

    def test_fold_uses_absolute_indices(self) -> None:
        """Should offset rows by the chunk start."""
        lines = [DiffLine("removed", 1, None, "gone")] + _unchanged(10, offset=1)
        chunk = chunkify(lines)[1]

        assert chunk.start == 1
        assert fold_chunk(chunk) == [1, 2, 3, Fold(4, 4), 8, 9, 10]

    def test_custom_context(self) -> None:
        """Should honour a smaller context size."""
        chunk = Chunk("unchanged", 0, tuple(_unchanged(5)))

        assert fold_chunk(chunk, 1) == [0, Fold(1, 3), 4]

    def test_expand_is_idempotent(self) -> None:
        """Should return the same hidden range every time without touching the chunk."""
        lines = tuple(_unchanged(12))
        chunk = Chunk("unchanged", 0, lines)
        fold = next(row for row in fold_chunk(chunk) if isinstance(row, Fold))

        first = expand_fold(fold)
        second = expand_fold(fold)

        assert first == second == range(3, 9)
        assert chunk.lines == lines
        assert fold_chunk(chunk) == fold_chunk(chunk)
