#!/usr/bin/env python3
"""
run.py: orchestrator for the treetop survey.

Wires the four stages:
  present → transpose → visibility   (Part 1: visible tree count)
  present → scenic                   (Part 2: best scenic score)

Zero algorithmic logic; pure sequencing.
"""

import argparse
import logging
from pathlib import Path

# Python module names cannot start with digits, so stages load via importlib
import importlib.util

def _import_stage_step(stage_name):
    """Helper to import step.py from stages with numeric prefixes."""
    spec = importlib.util.spec_from_file_location(
        f"{stage_name}.step",
        Path(__file__).parent / stage_name / "step.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

# Load stage modules
_present = _import_stage_step("01_present")
_transpose = _import_stage_step("02_transpose")
_visibility = _import_stage_step("03_visibility")
_scenic = _import_stage_step("04_scenic")

# Extract stage functions
load_grid = _present.load
transpose = _transpose.transpose
visible_coords = _visibility.visible_coords
best_vantage = _scenic.best_vantage


def process_part_1(text: str, trace: bool = False) -> int:
    """Number of trees visible from outside the grid."""
    if trace:
        logging.info("[present] parsing survey")
    grid = load_grid(text, trace=trace)

    if trace:
        logging.info("[transpose] building column view")
    transposed = transpose(grid, trace=trace)

    if trace:
        logging.info("[visibility] sweeping rows and columns")
    coords = visible_coords(grid, transposed, trace=trace)

    return len(coords)


def process_part_2(text: str, trace: bool = False, flip: bool = True) -> int:
    """
    Highest scenic score anywhere in the grid.

    The grid is read bottom-up by default (flip=True). The score is symmetric
    in all four directions, so orientation never changes the result.
    """
    if trace:
        logging.info("[present] parsing survey")
    grid = load_grid(text, flip=flip, trace=trace)

    if trace:
        logging.info("[scenic] scoring every vantage point")
    score, _ = best_vantage(grid, trace=trace)

    return score


def read_input(path: str) -> str:
    """
    Read the survey file and strip surrounding blank lines.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file holds no rows
    """
    input_file = Path(path)
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    text = input_file.read_text().strip("\r\n")
    if not text:
        raise ValueError(f"Input file is empty: {path}")

    return text


def run_file(path: str, part: str = "all", trace: bool = False, flip: bool = True) -> dict:
    """
    Execute the requested parts on one input file.

    Returns:
        {"part1": int, "part2": int}, with only the requested keys
    """
    if trace:
        logging.info(f"Loading survey from {path}")
    text = read_input(path)

    results = {}
    if part in ("1", "all"):
        results["part1"] = process_part_1(text, trace=trace)
    if part in ("2", "all"):
        results["part2"] = process_part_2(text, trace=trace, flip=flip)
    return results


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Treetop survey: visible trees and best scenic score",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py
  python run.py --input goldens/sample/sample_input.txt --trace
  python run.py --part 2 --no-flip
        """,
    )

    parser.add_argument(
        "--input",
        default="input.txt",
        help="Path to the survey file (default: input.txt)",
    )

    parser.add_argument(
        "--part",
        choices=["1", "2", "all"],
        default="all",
        help="Which result to compute (default: all)",
    )

    parser.add_argument(
        "--no-flip",
        dest="flip",
        action="store_false",
        help="Score Part 2 in natural top-to-bottom order",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable stage trace logging (INFO level)",
    )

    args = parser.parse_args()

    # Configure logging
    if args.trace:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
        )

    try:
        results = run_file(args.input, part=args.part, trace=args.trace, flip=args.flip)

    except (FileNotFoundError, ValueError) as e:
        logging.error(f"Input error: {e}")
        raise

    if "part1" in results:
        print(f"Part1: {results['part1']}")
    if "part2" in results:
        print(f"Part2: {results['part2']}")


if __name__ == "__main__":
    main()
