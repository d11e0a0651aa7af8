"""
Puzzle schema: stacked dials, their concentric rings, and the slots on them.

A Dial carries exactly NUM_RINGS ring entries. A ring entry is either None
(the dial has no band at that ring) or a list of NUM_COLUMNS slots. A slot
is either None (a hole that lets the dial underneath show through) or a
non-negative int printed on the face.

Rotation state is not stored: it is the current ordering of the slot lists.
Dial.rotate mutates the lists in place, so a Puzzle is the single mutable
value the solver works on. Shapes are checked once in __post_init__ and
never change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

NUM_COLUMNS = 12
NUM_RINGS = 4
NUM_DIALS = 5
TARGET_SUM = 42

Slot = Optional[int]
Ring = list[Slot]


def _check_slot(slot: object, ring_index: int, column: int) -> None:
    if slot is None:
        return
    # bool is an int subclass but never a printed value
    if isinstance(slot, bool) or not isinstance(slot, int):
        raise ValueError(
            f"ring {ring_index} column {column}: slot must be an int or None, got {slot!r}"
        )
    if slot < 0:
        raise ValueError(f"ring {ring_index} column {column}: slot cannot be negative, got {slot}")


@dataclass
class Dial:
    """
    One physical disc of the puzzle.

    Attributes:
        rings: Exactly NUM_RINGS entries, indexed 0 (outermost) to 3.
        movable: False for the fixed base dial.
    """

    rings: list[Optional[Ring]]
    movable: bool = True

    def __post_init__(self) -> None:
        if len(self.rings) != NUM_RINGS:
            raise ValueError(f"a dial must have {NUM_RINGS} ring entries, got {len(self.rings)}")
        rings: list[Optional[Ring]] = []
        for index, ring in enumerate(self.rings):
            if ring is None:
                rings.append(None)
                continue
            if len(ring) != NUM_COLUMNS:
                raise ValueError(f"ring {index} must have {NUM_COLUMNS} slots, got {len(ring)}")
            for column, slot in enumerate(ring):
                _check_slot(slot, index, column)
            rings.append(list(ring))
        self.rings = rings

    def rotate(self, steps: int = 1) -> None:
        """Shift every present ring so the last slot becomes the first, *steps* times."""
        shift = steps % NUM_COLUMNS
        if shift == 0:
            return
        for ring in self.rings:
            if ring is not None:
                ring[:] = ring[-shift:] + ring[:-shift]

    def slot(self, ring: int, column: int) -> Slot:
        """Slot at (ring, column), or None when the ring is absent or holed there.

        Raises:
            IndexError: If ring or column is outside the puzzle's shape.
        """
        if not 0 <= ring < NUM_RINGS:
            raise IndexError(f"ring index must be in [0, {NUM_RINGS}), got {ring}")
        if not 0 <= column < NUM_COLUMNS:
            raise IndexError(f"column index must be in [0, {NUM_COLUMNS}), got {column}")
        level = self.rings[ring]
        if level is None:
            return None
        return level[column]

    def copy(self) -> Dial:
        return Dial(rings=[None if r is None else list(r) for r in self.rings], movable=self.movable)


@dataclass
class Puzzle:
    """
    The full stack of dials in occlusion order: dials[0] is on top.

    Exactly one dial is fixed. The movable dials are enumerated by the
    solver in the order they appear here.
    """

    dials: list[Dial]

    def __post_init__(self) -> None:
        if len(self.dials) != NUM_DIALS:
            raise ValueError(f"a puzzle must have {NUM_DIALS} dials, got {len(self.dials)}")
        fixed = [i for i, dial in enumerate(self.dials) if not dial.movable]
        if len(fixed) != 1:
            raise ValueError(f"exactly one dial must be fixed, got {len(fixed)} ({fixed})")
        self.dials = list(self.dials)

    def movable_indices(self) -> tuple[int, ...]:
        """Indices of the rotatable dials, top to bottom."""
        return tuple(i for i, dial in enumerate(self.dials) if dial.movable)

    def copy(self) -> Puzzle:
        return Puzzle(dials=[dial.copy() for dial in self.dials])
