"""
Checker: occlusion resolution and the target-sum test.

The same visible table drives both the solver's constraint check and the
final console report.
"""

from .table import (
    CheckResult,
    check_puzzle,
    column_sums,
    compute_table,
    is_solved,
    visible_value,
)

__all__ = [
    "visible_value",
    "compute_table",
    "column_sums",
    "is_solved",
    "check_puzzle",
    "CheckResult",
]
