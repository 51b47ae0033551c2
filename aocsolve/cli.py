"""Command line entry point that solves a puzzle day from an input file."""

import argparse
import sys

from aocsolve import (
    year2015_day01,
    year2021_day01,
    year2021_day02,
    year2021_day03,
    year2021_day04,
    year2021_day05,
    year2021_day06,
    year2021_day07,
    year2021_day09,
    year2021_day10,
    year2021_day11,
    year2021_day12,
    year2021_day13,
    year2021_day14,
    year2021_day15,
    year2022_day01,
    year2022_day02,
    year2022_day03,
    year2022_day04,
    year2022_day05,
    year2022_day06,
    year2022_day08,
)

_SOLVERS = {
    (2015, 1): year2015_day01,
    (2021, 1): year2021_day01,
    (2021, 2): year2021_day02,
    (2021, 3): year2021_day03,
    (2021, 4): year2021_day04,
    (2021, 5): year2021_day05,
    (2021, 6): year2021_day06,
    (2021, 7): year2021_day07,
    (2021, 9): year2021_day09,
    (2021, 10): year2021_day10,
    (2021, 11): year2021_day11,
    (2021, 12): year2021_day12,
    (2021, 13): year2021_day13,
    (2021, 14): year2021_day14,
    (2021, 15): year2021_day15,
    (2022, 1): year2022_day01,
    (2022, 2): year2022_day02,
    (2022, 3): year2022_day03,
    (2022, 4): year2022_day04,
    (2022, 5): year2022_day05,
    (2022, 6): year2022_day06,
    (2022, 8): year2022_day08,
}


def solve(year, day, part, text):
    """Answer for one part of one puzzle day, given its input text."""
    solver = _SOLVERS.get((year, day))
    if solver is None:
        raise ValueError(f"no solver for {year} day {day}")
    if part == 1:
        return solver.part1(text)
    if part == 2:
        return solver.part2(text)
    raise ValueError(f"part must be 1 or 2, not {part}")


def main(argv=None):
    """Read the input file, print the answers and return an exit status."""
    parser = argparse.ArgumentParser(prog="aocsolve", description="Solve a puzzle day.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    parser.add_argument("--input", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    if (args.year, args.day) not in _SOLVERS:
        parser.error(f"no solver for {args.year} day {args.day}")

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"aocsolve: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    parts = (args.part,) if args.part else (1, 2)
    try:
        for part in parts:
            print(f"part{part}: {solve(args.year, args.day, part, text)}")
    except ValueError as exc:
        print(f"aocsolve: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())