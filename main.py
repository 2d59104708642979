"""
MatrixSpaces — Entry point.

Compute the RREF and the four fundamental subspaces of a matrix from the
command line, e.g.::

    matrixspaces "1 2 3; 4 5 6" --steps

Rows are separated by ``;`` and cells by spaces or commas.  With no matrix
every built-in example is solved.
"""

import argparse
import json
import logging
import re
import sys

from matrixspaces.engine import EXAMPLE_MATRICES, compute_report
from matrixspaces.errors import MatrixError
from matrixspaces.report import build_plain_text
from matrixspaces.settings import get_settings, log_level_from_env


def parse_grid(text: str) -> list[list[str]]:
    """Split ``"1 2; 3/4, -5"`` into ``[["1", "2"], ["3/4", "-5"]]``.

    Whitespace around ``/`` is dropped first so ``"1 / 2"`` stays one cell.
    """
    text = re.sub(r'\s*/\s*', '/', text)
    rows = [r for r in text.split(';') if r.strip()]
    return [[c for c in re.split(r'[\s,]+', r.strip()) if c] for r in rows]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixspaces",
        description="Exact RREF, rank and fundamental subspaces of a matrix (up to 5×5).",
    )
    parser.add_argument("matrix", nargs="?",
                        help='rows separated by ";" and cells by spaces or commas')
    parser.add_argument("--steps", action="store_true",
                        help="show every elementary row operation")
    parser.add_argument("--json", action="store_true",
                        help="print the full report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings({"log_level": "DEBUG" if args.verbose else log_level_from_env()})
    logging.basicConfig(level=settings["log_level"],
                        format="%(levelname)s %(name)s: %(message)s")

    if args.matrix is None:
        jobs = [(ex["name"], ex["matrix"]) for ex in EXAMPLE_MATRICES]
    else:
        jobs = [(None, parse_grid(args.matrix))]

    # Only --steps and --json show the operation log.
    track = settings["track_operations"] and (args.steps or args.json)
    for name, grid in jobs:
        try:
            report = compute_report(grid, track_operations=track)
        except MatrixError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
            continue
        if name:
            print(f"\n{name}")
        print(build_plain_text(report, show_steps=args.steps,
                               decimals=settings["decimals"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
