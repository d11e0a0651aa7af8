"""Command-line entry point: ``grecian`` or ``python -m grecian``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from grecian.config import SettingsError, load_settings
from grecian.orchestrator.pipeline import PipelineError, SolverPipeline
from grecian.writer.report import format_report

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_SOLUTION = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grecian", description="Grecian dial puzzle solver")
    parser.add_argument("--in", dest="input_path", help="puzzle file (JSON or YAML)")
    parser.add_argument("--out", dest="output_path", help="where to write the solved puzzle")
    parser.add_argument("--target", dest="target_sum", type=int, help="required column sum")
    parser.add_argument("--config", dest="config_path", help="settings YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Grecian Puzzle!")

    try:
        settings = load_settings(args.config_path).with_overrides(
            input_path=args.input_path,
            output_path=args.output_path,
            target_sum=args.target_sum,
        )
    except SettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        output = SolverPipeline().run(settings)
    except PipelineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NO_SOLUTION if exc.stage == "solve" else EXIT_FAILURE

    print(format_report(output.result, output.check.table, output.check.sums, output.elapsed_ms))
    print(f"Solution written to {output.output_path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
