"""
Plain-text rendering of a visible table and the end-of-run report.

Values are printed row-major, one ring per line, each right-aligned in a
field three characters wide.
"""

from __future__ import annotations

from typing import Sequence

from grecian.solver.solver import SolveResult

_CELL_WIDTH = 3


def format_row(values: Sequence[int]) -> str:
    return " ".join(f"{value:{_CELL_WIDTH}}" for value in values)


def format_table(table: Sequence[Sequence[int]]) -> str:
    """Render *table* one row per line."""
    return "\n".join(format_row(row) for row in table)


def format_report(
    result: SolveResult,
    table: Sequence[Sequence[int]],
    sums: Sequence[int],
    elapsed_ms: float,
) -> str:
    """
    Build the console report for a solved puzzle.

    Args:
        result: The solver's result.
        table: Visible table of the solved puzzle.
        sums: Column sums of *table*.
        elapsed_ms: Wall-clock search time in milliseconds.
    """
    separator = "-" * len(format_row(sums))
    lines = [
        f"Solved in {elapsed_ms:.0f}ms ({result.checks} checks)",
        format_table(table),
        separator,
        format_row(sums),
        f"Offsets: {', '.join(str(offset) for offset in result.offsets)}",
    ]
    return "\n".join(lines)
