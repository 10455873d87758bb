"""Longest-common-subsequence table and backtracker shared by the line and word differs.

The table is dense, so memory grows with ``len(seq_a) * len(seq_b)``. Very
large inputs are diffed anyway; a warning is logged past ``LARGE_TABLE_CELLS``.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from treediff.models import EditOp

LOGGER = logging.getLogger(__name__)

LARGE_TABLE_CELLS = 25_000_000

LcsTable = List[List[int]]


def build_table(seq_a: Sequence, seq_b: Sequence) -> LcsTable:
    """Build the ``(m+1) x (n+1)`` table of common-subsequence lengths."""
    m, n = len(seq_a), len(seq_b)
    cells = (m + 1) * (n + 1)
    if cells > LARGE_TABLE_CELLS:
        LOGGER.warning("Building a %d x %d LCS table (%d cells)", m + 1, n + 1, cells)

    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row = table[i]
        prev = table[i - 1]
        item = seq_a[i - 1]
        for j in range(1, n + 1):
            if item == seq_b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return table


def backtrack(table: LcsTable, seq_a: Sequence, seq_b: Sequence) -> List[EditOp]:
    """Walk the table from the bottom-right corner and return ops in forward order.

    When both directions keep the same LCS length, ``added`` is taken first.
    """
    ops: List[EditOp] = []
    i, j = len(seq_a), len(seq_b)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and seq_a[i - 1] == seq_b[j - 1]:
            ops.append(EditOp("equal", i - 1, j - 1, seq_a[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(EditOp("added", None, j - 1, seq_b[j - 1]))
            j -= 1
        else:
            ops.append(EditOp("removed", i - 1, None, seq_a[i - 1]))
            i -= 1
    ops.reverse()
    return ops


def diff_sequences(seq_a: Sequence, seq_b: Sequence) -> List[EditOp]:
    return backtrack(build_table(seq_a, seq_b), seq_a, seq_b)
