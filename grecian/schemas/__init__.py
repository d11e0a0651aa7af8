"""
Data model for the Grecian dial puzzle.

Dials are stacked in a fixed occlusion order; each carries four rings of
twelve slots. The constants below fix the puzzle's shape.
"""

from .puzzle import (
    NUM_COLUMNS,
    NUM_DIALS,
    NUM_RINGS,
    TARGET_SUM,
    Dial,
    Puzzle,
    Ring,
    Slot,
)

__all__ = [
    # shape
    "NUM_COLUMNS",
    "NUM_RINGS",
    "NUM_DIALS",
    "TARGET_SUM",
    # types
    "Slot",
    "Ring",
    "Dial",
    "Puzzle",
]
