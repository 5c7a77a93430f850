"""Command line entry point: solve a given day's puzzle for an input file."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aocdays import day1, day2, day3, day4, day5

PROGRAM = "aoc"

_SOLVERS: dict[int, Callable[[str | Path], object]] = {
    1: day1.run,
    2: day2.run,
    3: day3.run,
    4: day4.run,
    5: day5.run,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_day(value: str) -> int:
    """Read a leading integer, yielding 0 when there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver for ``<day> <input_file>``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"Usage: {PROGRAM} <day> <input_file>")
        return 1

    day = _parse_day(args[0])
    solver = _SOLVERS.get(day)
    if solver is None:
        print(f"Day {day} is not implemented yet.")
    else:
        solver(args[1])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())