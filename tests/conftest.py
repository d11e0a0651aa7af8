"""
Shared puzzle builders.

engineered_puzzle(offsets) builds a puzzle with exactly one solution: the
fixed dial shows a full set of values on every ring except for one zeroed
"deficit" column per ring, and movable dial i carries a single opaque slot
on ring i that covers that deficit only after exactly offsets[i] rotations.
"""

from __future__ import annotations

import pytest

from grecian.schemas.puzzle import NUM_COLUMNS, NUM_DIALS, NUM_RINGS, Dial, Puzzle

RING_VALUES = (10, 10, 10, 12)  # sums to 42
DEFICIT_COLUMNS = (0, 4, 8, 2)


def build_engineered_puzzle(offsets: tuple[int, ...], fixed: int = NUM_DIALS - 1) -> Puzzle:
    base_rings = []
    for ring, value in enumerate(RING_VALUES):
        row = [value] * NUM_COLUMNS
        row[DEFICIT_COLUMNS[ring]] = 0
        base_rings.append(row)

    dials = []
    for ring, (value, offset) in enumerate(zip(RING_VALUES, offsets)):
        rings: list = [None] * NUM_RINGS
        cover: list = [None] * NUM_COLUMNS
        cover[(DEFICIT_COLUMNS[ring] - offset) % NUM_COLUMNS] = value
        rings[ring] = cover
        dials.append(Dial(rings=rings))
    dials.append(Dial(rings=base_rings))

    for index, dial in enumerate(dials):
        dial.movable = index != fixed
    return Puzzle(dials=dials)


def build_unsolvable_puzzle() -> Puzzle:
    """Only the base shows anything, and its columns sum to 41."""
    empty = [Dial(rings=[None] * NUM_RINGS) for _ in range(NUM_DIALS - 1)]
    base = Dial(
        rings=[[10] * NUM_COLUMNS, [10] * NUM_COLUMNS, [10] * NUM_COLUMNS, [11] * NUM_COLUMNS],
        movable=False,
    )
    return Puzzle(dials=[*empty, base])


@pytest.fixture
def engineered_puzzle():
    return build_engineered_puzzle


@pytest.fixture
def unsolvable_puzzle() -> Puzzle:
    return build_unsolvable_puzzle()
