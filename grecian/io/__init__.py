from .codec import (
    RING_KEYS,
    PuzzleLoadError,
    load_puzzle,
    puzzle_from_dict,
    puzzle_to_dict,
    save_puzzle,
)

__all__ = [
    "RING_KEYS",
    "PuzzleLoadError",
    "load_puzzle",
    "save_puzzle",
    "puzzle_from_dict",
    "puzzle_to_dict",
]
