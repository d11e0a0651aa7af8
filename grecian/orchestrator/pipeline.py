"""
SolverPipeline — wires loading, search, verification and output.

Pipeline stages:

  1. load_puzzle()   → Puzzle                 PipelineError("load") on failure
  2. solve()         → SolveResult            PipelineError("solve") when no
                                              rotation satisfies the target
  3. check_puzzle()  → CheckResult            PipelineError("check") if the
                                              solved state fails re-verification
  4. save_puzzle()   → solved puzzle on disk  PipelineError("write") on failure

Only the search itself is timed. No stage is retried: every stage is
deterministic, so running it again on the same input gives the same outcome.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from grecian.checker.table import CheckResult, check_puzzle
from grecian.config import Settings
from grecian.io.codec import PuzzleLoadError, load_puzzle, save_puzzle
from grecian.solver.solver import NoSolutionError, SolveResult, solve

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """Raised when a pipeline stage fails.

    Attributes:
        stage: Name of the stage that failed
            (``"load"``, ``"solve"``, ``"check"``, or ``"write"``).
        detail: Human-readable description of the failure.
    """

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"[{stage}] {detail}")
        self.stage = stage
        self.detail = detail


@dataclass(frozen=True)
class PipelineOutput:
    """Output of a successful run."""

    result: SolveResult
    check: CheckResult
    elapsed_ms: float
    output_path: Path


class SolverPipeline:
    """
    Load, solve, verify and write one puzzle.

    Any failure raises :class:`PipelineError` with the failing stage name.
    """

    def run(self, settings: Settings) -> PipelineOutput:
        """Execute every stage and return a completed :class:`PipelineOutput`.

        Parameters
        ----------
        settings:
            Input and output paths, target sum and output indentation.

        Raises
        ------
        PipelineError
            If any stage fails. ``stage == "solve"`` means the puzzle has no
            solution; the other stages indicate bad input or I/O problems.
        """
        # Stage 1: read and verify the puzzle file
        try:
            puzzle = load_puzzle(settings.input_path)
        except PuzzleLoadError as exc:
            raise PipelineError("load", str(exc)) from exc

        # Stage 2: exhaustive search
        logger.info("searching for column sums of %d", settings.target_sum)
        start = time.perf_counter()
        try:
            result = solve(puzzle, settings.target_sum)
        except NoSolutionError as exc:
            raise PipelineError("solve", str(exc)) from exc
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info("solved in %.1fms after %d checks", elapsed_ms, result.checks)

        # Stage 3: re-verify the winning orientation
        check = check_puzzle(result.puzzle, settings.target_sum)
        if not check.passed:
            raise PipelineError(
                "check", f"solved puzzle fails columns {list(check.failing_columns)}"
            )

        # Stage 4: write the solved puzzle
        try:
            save_puzzle(result.puzzle, settings.output_path, indent=settings.indent)
        except OSError as exc:
            raise PipelineError("write", f"{settings.output_path}: {exc}") from exc

        return PipelineOutput(
            result=result,
            check=check,
            elapsed_ms=elapsed_ms,
            output_path=settings.output_path,
        )
