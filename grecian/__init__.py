"""
Solver for the Grecian dial puzzle.

Five stacked dials, four of them rotatable, each carry four rings of twelve
slots. Holes in an upper dial let the dial underneath show through. The
puzzle is solved when every one of the twelve columns of visible values
sums to 42. The solver finds the rotation by exhaustive search.
"""

from .checker import check_puzzle, compute_table, is_solved, visible_value
from .io import PuzzleLoadError, load_puzzle, save_puzzle
from .schemas import Dial, Puzzle
from .solver import NoSolutionError, SolveResult, solve

__all__ = [
    # model
    "Dial",
    "Puzzle",
    # checker
    "visible_value",
    "compute_table",
    "is_solved",
    "check_puzzle",
    # solver
    "solve",
    "SolveResult",
    "NoSolutionError",
    # io
    "load_puzzle",
    "save_puzzle",
    "PuzzleLoadError",
]
