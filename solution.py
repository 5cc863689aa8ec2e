"""Sum calibration values or cube-game scores from a line-oriented input file.

Two puzzles share the same driver:
  calibrate  – each line's first and last numeric token form a two-digit value
               (10 * first + last); with --words the spelled-out numbers
               "one".."nine" count as tokens too, overlaps included ("twone")
  games      – "Game <id>: 3 blue, 4 red; ..." records; sums the ids of games
               possible under the bag limit, or with --power the power of each
               game's minimal bag
"""

from __future__ import annotations

import argparse
import logging
import sys

from calibration_errors import CalibrationError
from calibration_models import Draw, LineResult
from calibration_pipeline import (
    calibrate_lines,
    read_lines,
    sum_game_powers,
    sum_possible_games,
    total_results,
)
from cube_games import DEFAULT_LIMIT

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _print_entry(result: LineResult) -> None:
    if not result.ok:
        print(f"  line {result.line_number:>5}: {result.text!r}  ERROR {result.error.message}")
        return
    detail = ""
    if result.first is not None:
        first, last = result.first, result.last
        detail = f"  (first {first.kind} @{first.position}, last {last.kind} @{last.position})"
    print(f"  line {result.line_number:>5}: {result.text!r} -> {result.value}{detail}")


def run_calibrate(args: argparse.Namespace) -> int:
    results = calibrate_lines(read_lines(args.input), words=args.words, strict=args.strict)
    if args.verbose:
        for result in results:
            _print_entry(result)
        print("=" * 64)
    return total_results(results, skip_invalid=args.skip_invalid)


def run_games(args: argparse.Namespace) -> int:
    lines = read_lines(args.input)
    if args.power:
        return sum_game_powers(lines)
    limit = Draw(red=args.max_red, green=args.max_green, blue=args.max_blue)
    logger.debug("bag limit: %s", limit)
    return sum_possible_games(lines, limit)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum calibration values or cube-game scores from a text file.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show a per-line breakdown and debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cal = sub.add_parser(
        "calibrate", parents=[common], help="Sum first/last digit values per line"
    )
    cal.add_argument("input", help="Path to the input file (text or PDF)")
    cal.add_argument(
        "--words",
        action="store_true",
        help="Also count spelled-out digits one..nine",
    )
    cal.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Log and skip lines without tokens instead of failing",
    )
    cal.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a digit and a number word start at the same position",
    )
    cal.set_defaults(func=run_calibrate)

    games = sub.add_parser("games", parents=[common], help="Score cube-game records")
    games.add_argument("input", help="Path to the input file (text or PDF)")
    games.add_argument(
        "--power",
        action="store_true",
        help="Sum the power of each game's minimal bag instead of possible ids",
    )
    games.add_argument("--max-red", type=int, default=DEFAULT_LIMIT.red, metavar="N")
    games.add_argument("--max-green", type=int, default=DEFAULT_LIMIT.green, metavar="N")
    games.add_argument("--max-blue", type=int, default=DEFAULT_LIMIT.blue, metavar="N")
    games.set_defaults(func=run_games)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        total = args.func(args)
    except CalibrationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
