#!/usr/bin/env python3
"""
Solve one puzzle and print the shortest solution.

    python -m puzzles.experiments.solve clock 12 1 6
    python -m puzzles.experiments.solve strings AAA BBB
    python -m puzzles.experiments.solve chess data/chess-1.txt
    python -m puzzles.experiments.solve hoppers data/hoppers-1.txt
"""
from __future__ import annotations
import argparse, logging, sys

from puzzles.domains.chess import load_chess
from puzzles.domains.clock import ClockConfig
from puzzles.domains.hoppers import load_hoppers
from puzzles.domains.strings import StringsConfig
from puzzles.domains.boards import PuzzleFileError
from puzzles.search.bfs import SearchResult, solve
from puzzles.search.state import render


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Breadth-first puzzle solver")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = ap.add_subparsers(dest="domain", required=True)

    p = sub.add_parser("clock", help="clock arithmetic")
    p.add_argument("hours", type=int)
    p.add_argument("start", type=int)
    p.add_argument("end", type=int)

    p = sub.add_parser("strings", help="letter ladder A..Z")
    p.add_argument("start")
    p.add_argument("end")

    for name in ("chess", "hoppers"):
        p = sub.add_parser(name, help=f"{name} board file")
        p.add_argument("filename")
    return ap


def start_state(args):
    """Build the start configuration and the header lines to print before the report."""
    if args.domain == "clock":
        cfg = ClockConfig(args.hours, args.start, args.end)
        return cfg, [f"Hours: {args.hours}, Start: {args.start}, End: {args.end}"]
    if args.domain == "strings":
        cfg = StringsConfig(args.start, args.end)
        return cfg, [f"Start: {args.start}, End: {args.end}"]
    loader = load_chess if args.domain == "chess" else load_hoppers
    cfg = loader(args.filename)
    return cfg, [f"File: {args.filename}", cfg.render()]


def print_report(res: SearchResult, multiline: bool) -> None:
    print(f"Total configs: {res.stats.total_generated}")
    print(f"Unique configs: {res.stats.unique_visited}")
    if not res.solved:
        print("No solution")
    for i, s in enumerate(res.path):
        if multiline:
            print(f"Step {i}:\n{render(s)}")
        else:
            print(f"Step {i}: {render(s)}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        start, header = start_state(args)
    except (OSError, PuzzleFileError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in header:
        print(line)
    res = solve(start)
    print_report(res, multiline=args.domain in ("chess", "hoppers"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
