"""Edit distance calculation with optimal alignment reconstruction.

This module computes the Levenshtein distance (unit cost insert, delete and
substitute) between two strings with a dynamic programming table, then walks
the table back from the bottom-right corner to recover one optimal alignment.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_GAP_MARKER = " "


class EditOperation(Enum):
    """Operation realized by one column of an alignment."""

    MATCH = "match"
    SUBSTITUTE = "substitute"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class EditDistanceResult:
    """Edit distance between two strings and one optimal alignment.

    Attributes:
        distance: Minimum number of edits turning the first string into the second.
        aligned_1: First string with gap markers inserted.
        aligned_2: Second string with gap markers inserted. Same length as aligned_1.
        gap_marker: Character used for gaps in both aligned strings.
        edit_script: Operation of each alignment column, left to right, as
            recorded by the backtrace.
    """

    distance: int
    aligned_1: str
    aligned_2: str
    gap_marker: str = DEFAULT_GAP_MARKER
    edit_script: tuple[EditOperation, ...] = ()

    def operations(self) -> Iterator[EditOperation]:
        """Yield the edit operation of each alignment column, left to right.

        Operations come from the backtrace rather than from the aligned
        characters, so inputs containing the gap marker are labelled correctly.
        """
        yield from self.edit_script


def build_distance_table(s1: str, s2: str) -> np.ndarray:
    """Fill the edit distance table for s1 and s2.

    Args:
        s1: First string (length m).
        s2: Second string (length n).

    Returns:
        (m+1) x (n+1) integer array where cell [i, j] is the edit distance
        between the first i characters of s1 and the first j characters of s2.
    """
    m, n = len(s1), len(s2)
    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[:, 0] = np.arange(m + 1)
    table[0, :] = np.arange(n + 1)

    for i in range(m):
        for j in range(n):
            if s1[i] == s2[j]:
                table[i + 1, j + 1] = table[i, j]
            else:
                table[i + 1, j + 1] = 1 + min(table[i, j], table[i, j + 1], table[i + 1, j])

    return table


def backtrace_alignment(
    s1: str, s2: str, table: np.ndarray, gap_marker: str = DEFAULT_GAP_MARKER
) -> tuple[str, str, tuple[EditOperation, ...]]:
    """Recover one optimal alignment from a filled distance table.

    Ties between neighbouring cells are broken diagonal first, then left
    (consume s2), then up (consume s1). The output is reproducible for a
    given pair of strings.

    Args:
        s1: First string.
        s2: Second string.
        table: Table returned by build_distance_table(s1, s2).
        gap_marker: Character emitted opposite an inserted or deleted character.

    Returns:
        Tuple of (aligned_1, aligned_2, edit_script). Both aligned strings and
        the edit script have one entry per alignment column.
    """
    i, j = len(s1), len(s2)
    reversed_1: list[str] = []
    reversed_2: list[str] = []
    reversed_ops: list[EditOperation] = []

    while i > 0 or j > 0:
        if i == 0:
            move = EditOperation.INSERT
        elif j == 0:
            move = EditOperation.DELETE
        else:
            diagonal = table[i - 1, j - 1]
            left = table[i, j - 1]
            up = table[i - 1, j]
            best = min(diagonal, left, up)

            if best == diagonal:
                move = EditOperation.MATCH if s1[i - 1] == s2[j - 1] else EditOperation.SUBSTITUTE
            elif best == left:
                move = EditOperation.INSERT
            else:
                move = EditOperation.DELETE

        reversed_ops.append(move)
        if move is EditOperation.INSERT:
            reversed_1.append(gap_marker)
            reversed_2.append(s2[j - 1])
            j -= 1
        elif move is EditOperation.DELETE:
            reversed_1.append(s1[i - 1])
            reversed_2.append(gap_marker)
            i -= 1
        else:
            reversed_1.append(s1[i - 1])
            reversed_2.append(s2[j - 1])
            i -= 1
            j -= 1

    return (
        "".join(reversed(reversed_1)),
        "".join(reversed(reversed_2)),
        tuple(reversed(reversed_ops)),
    )


def calculate_edit_distance(
    s1: str, s2: str, gap_marker: str = DEFAULT_GAP_MARKER
) -> EditDistanceResult:
    """Calculate the edit distance between two strings and align them.

    Args:
        s1: First string.
        s2: Second string.
        gap_marker: Character used for gaps in the alignment (default: space).

    Returns:
        EditDistanceResult with the distance, the aligned strings and the
        edit script.

    Example:
        >>> calculate_edit_distance("kitten", "sitting").distance
        3
    """
    logger.debug("Building %dx%d edit distance table", len(s1) + 1, len(s2) + 1)
    table = build_distance_table(s1, s2)
    aligned_1, aligned_2, edit_script = backtrace_alignment(s1, s2, table, gap_marker)
    return EditDistanceResult(
        distance=int(table[len(s1), len(s2)]),
        aligned_1=aligned_1,
        aligned_2=aligned_2,
        gap_marker=gap_marker,
        edit_script=edit_script,
    )
