"""
Exhaustive rotation search.

The movable dials' rotation offsets form an odometer in base NUM_COLUMNS:
the first movable dial is the fastest digit, the last movable dial the
slowest. Each step checks the current state and then rotates the fastest
dial once; when a dial wraps back to offset 0 the carry rotates the next
dial. With four movable dials that is 12**4 = 20,736 checks in the worst
case.

The puzzle is mutated in place. On success it is left in the winning
orientation; on exhaustion every dial has wrapped around and the puzzle is
back in its starting orientation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grecian.checker.table import compute_table, is_solved
from grecian.schemas.puzzle import NUM_COLUMNS, TARGET_SUM, Puzzle

logger = logging.getLogger(__name__)


class NoSolutionError(Exception):
    """Raised when no rotation of the movable dials satisfies the target sum.

    Attributes:
        checks: Number of configurations tested before giving up.
    """

    def __init__(self, checks: int) -> None:
        super().__init__(f"No solution found after {checks} checks")
        self.checks = checks


@dataclass(frozen=True)
class SolveResult:
    """A solved puzzle and how the search got there.

    Attributes:
        puzzle: The puzzle in its winning orientation (same object passed in).
        offsets: Rotation steps applied to each movable dial, top to bottom.
        checks: Number of configurations tested, including the winning one.
    """

    puzzle: Puzzle
    offsets: tuple[int, ...]
    checks: int


def solve(puzzle: Puzzle, target: int = TARGET_SUM) -> SolveResult:
    """
    Search every rotation of the movable dials for one that solves *puzzle*.

    Args:
        puzzle: Puzzle to solve; rotated in place.
        target: Required sum for every column of the visible table.

    Returns:
        The first solution in odometer order.

    Raises:
        NoSolutionError: If the whole search space is exhausted.
    """
    movable = puzzle.movable_indices()
    offsets = [0] * len(movable)
    checks = 0

    while True:
        checks += 1
        if is_solved(compute_table(puzzle), target):
            logger.debug("solved at offsets %s after %d checks", tuple(offsets), checks)
            return SolveResult(puzzle=puzzle, offsets=tuple(offsets), checks=checks)

        # advance the odometer by one, carrying on wrap-around
        for digit, dial_index in enumerate(movable):
            puzzle.dials[dial_index].rotate()
            offsets[digit] = (offsets[digit] + 1) % NUM_COLUMNS
            if offsets[digit] != 0:
                break
        else:
            logger.debug("search exhausted after %d checks", checks)
            raise NoSolutionError(checks)
