"""
Visible table computation and the target-sum check.

For each (ring, column) the visible value is the first present slot found
scanning the dials top to bottom. The visible table is the NUM_RINGS x
NUM_COLUMNS grid of those values with empty cells counted as 0. The puzzle
is solved when every column of the table sums to the target.

check_puzzle wraps the same computation in a CheckResult so the caller can
report which columns miss the target instead of just a boolean.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from grecian.schemas.puzzle import NUM_COLUMNS, NUM_RINGS, TARGET_SUM, Puzzle


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one puzzle state against the target sum."""

    passed: bool
    table: tuple[tuple[int, ...], ...]
    sums: tuple[int, ...]
    failing_columns: tuple[int, ...]


def visible_value(puzzle: Puzzle, ring: int, column: int) -> Optional[int]:
    """Return the value showing at (ring, column), or None if every dial is open there."""
    for dial in puzzle.dials:
        value = dial.slot(ring, column)
        if value is not None:
            return value
    return None


def compute_table(puzzle: Puzzle) -> list[list[int]]:
    """Build the visible table: one row per ring, one entry per column."""
    table = [[0] * NUM_COLUMNS for _ in range(NUM_RINGS)]
    for ring in range(NUM_RINGS):
        for column in range(NUM_COLUMNS):
            value = visible_value(puzzle, ring, column)
            if value is not None:
                table[ring][column] = value
    return table


def column_sums(table: list[list[int]]) -> list[int]:
    return [sum(row[column] for row in table) for column in range(NUM_COLUMNS)]


def is_solved(table: list[list[int]], target: int = TARGET_SUM) -> bool:
    """True iff every column of *table* sums to *target*."""
    for column in range(NUM_COLUMNS):
        if sum(row[column] for row in table) != target:
            return False
    return True


def check_puzzle(puzzle: Puzzle, target: int = TARGET_SUM) -> CheckResult:
    """
    Compute the visible table of *puzzle* and test every column.

    Parameters
    ----------
    puzzle:
        The puzzle in its current rotation state. Not modified.
    target:
        Required sum for every column.

    Returns
    -------
    CheckResult with ``passed=True`` and no failing columns when every
    column sum equals *target*.
    """
    table = compute_table(puzzle)
    sums = column_sums(table)
    failing = tuple(column for column, total in enumerate(sums) if total != target)
    return CheckResult(
        passed=len(failing) == 0,
        table=tuple(tuple(row) for row in table),
        sums=tuple(sums),
        failing_columns=failing,
    )
