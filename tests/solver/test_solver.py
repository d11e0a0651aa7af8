"""
Tests for grecian.solver.solver — odometer search, tie-break order, exhaustion.

The engineered puzzles from conftest have exactly one solving rotation, so
the number of checks the solver reports is fully determined by the odometer
order: first movable dial fastest, last movable dial slowest.
"""

from __future__ import annotations

import pytest

from grecian.checker.table import check_puzzle
from grecian.schemas.puzzle import NUM_COLUMNS, NUM_RINGS, Dial, Puzzle
from grecian.solver.solver import NoSolutionError, SolveResult, solve


def _odometer_position(offsets: tuple[int, ...]) -> int:
    """Checks needed to reach *offsets*, counting the winning check."""
    return 1 + sum(offset * NUM_COLUMNS**digit for digit, offset in enumerate(offsets))


class TestSolveSuccess:
    def test_identity_solution_on_first_check(self, engineered_puzzle):
        result = solve(engineered_puzzle((0, 0, 0, 0)))
        assert isinstance(result, SolveResult)
        assert result.offsets == (0, 0, 0, 0)
        assert result.checks == 1

    def test_finds_known_offsets(self, engineered_puzzle):
        result = solve(engineered_puzzle((3, 7, 0, 11)))
        assert result.offsets == (3, 7, 0, 11)
        assert result.checks == _odometer_position((3, 7, 0, 11)) == 19096

    def test_returns_the_same_puzzle_in_winning_orientation(self, engineered_puzzle):
        puzzle = engineered_puzzle((5, 0, 9, 1))
        result = solve(puzzle)
        assert result.puzzle is puzzle
        assert check_puzzle(puzzle).passed

    def test_fixed_dial_is_never_rotated(self, engineered_puzzle):
        puzzle = engineered_puzzle((3, 7, 0, 11))
        base = puzzle.dials[4].copy()
        solve(puzzle)
        assert puzzle.dials[4] == base

    def test_custom_target(self, engineered_puzzle):
        puzzle = engineered_puzzle((0, 0, 0, 0))
        # remove ring 3 everywhere: columns then sum to 30 once all deficits are covered
        for dial in puzzle.dials:
            dial.rings[3] = None
        result = solve(puzzle, target=30)
        assert result.offsets == (0, 0, 0, 0)

    def test_deterministic(self, engineered_puzzle):
        first = solve(engineered_puzzle((2, 11, 4, 0)))
        second = solve(engineered_puzzle((2, 11, 4, 0)))
        assert first.offsets == second.offsets
        assert first.checks == second.checks


def _two_way_puzzle() -> Puzzle:
    """
    Base ring 0 has a zero at column 0. Dial 0 covers it after 5 rotations,
    dial 1 after 1 rotation; either alone solves the puzzle.
    """
    base = Dial(
        rings=[
            [0] + [10] * (NUM_COLUMNS - 1),
            [10] * NUM_COLUMNS,
            [10] * NUM_COLUMNS,
            [12] * NUM_COLUMNS,
        ],
        movable=False,
    )
    top_cover: list = [None] * NUM_COLUMNS
    top_cover[-5 % NUM_COLUMNS] = 10
    second_cover: list = [None] * NUM_COLUMNS
    second_cover[-1 % NUM_COLUMNS] = 10
    empty = [None] * NUM_RINGS
    return Puzzle(
        dials=[
            Dial(rings=[top_cover, None, None, None]),
            Dial(rings=[second_cover, None, None, None]),
            Dial(rings=list(empty)),
            Dial(rings=list(empty)),
            base,
        ]
    )


class TestTieBreak:
    def test_both_rotations_solve(self):
        for dial_index, steps in ((0, 5), (1, 1)):
            puzzle = _two_way_puzzle()
            puzzle.dials[dial_index].rotate(steps)
            assert check_puzzle(puzzle).passed

    def test_first_movable_dial_is_the_fastest_digit(self):
        # (5, 0, 0, 0) is reached at check 6, before (0, 1, 0, 0) at check 13
        result = solve(_two_way_puzzle())
        assert result.offsets == (5, 0, 0, 0)
        assert result.checks == 6 == _odometer_position((5, 0, 0, 0))


class TestMovableFlag:
    def test_fixed_dial_in_the_middle(self, engineered_puzzle):
        # dial 2 is fixed at its solving position, so the base must stay at 0
        puzzle = engineered_puzzle((3, 7, 0, 11), fixed=2)
        assert puzzle.movable_indices() == (0, 1, 3, 4)
        result = solve(puzzle)
        assert result.offsets == (3, 7, 11, 0)
        assert result.checks == _odometer_position((3, 7, 11, 0))


class TestSolveExhaustion:
    def test_no_solution_after_every_configuration(self, unsolvable_puzzle):
        snapshot = unsolvable_puzzle.copy()
        with pytest.raises(NoSolutionError) as excinfo:
            solve(unsolvable_puzzle)
        assert excinfo.value.checks == NUM_COLUMNS**4
        # every dial wrapped back to where it started
        assert unsolvable_puzzle == snapshot

    def test_error_message(self):
        assert str(NoSolutionError(20736)) == "No solution found after 20736 checks"
